"""
Configuration models for the build findings extractor.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .severity import Severity


class ReaderConfig(BaseModel):
    """Configuration for decoding raw tool output."""

    fallback_encoding: str = Field(
        default="utf-8", description="Encoding used when detection is not conclusive"
    )
    detect_encoding: bool = Field(
        default=True, description="Detect the encoding of byte input with chardet"
    )
    max_detection_bytes: int = Field(
        default=10000, ge=1, description="Number of bytes sampled for detection"
    )
    min_confidence: float = Field(
        default=0.7, ge=0.0, le=1.0, description="Minimum detection confidence"
    )
    normalize_line_endings: bool = Field(
        default=True, description="Convert CRLF and CR line endings to LF"
    )

    @field_validator("fallback_encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Ensure the fallback encoding is known to Python."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class AnalysisConfig(BaseModel):
    """Main configuration for a command line parse run."""

    parser_id: str = Field(..., description="ID of the parser to use")
    input_file: Path = Field(..., description="Tool output to parse")
    minimum_severity: str = Field(
        default="LOW", description="Lowest severity that is reported"
    )
    encoding: Optional[str] = Field(
        default=None, description="Encoding of the input, detected if not set"
    )
    reader: ReaderConfig = Field(
        default_factory=ReaderConfig, description="Reader configuration"
    )
    log_level: str = Field(default="WARNING", description="Logging level")
    quiet: bool = Field(default=False, description="Only print the summary")

    @field_validator("parser_id")
    @classmethod
    def normalize_parser_id(cls, v):
        """Parser IDs are case-insensitive."""
        return v.strip().lower()

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_input_file(cls, v):
        """Convert string path to Path object."""
        return Path(v) if not isinstance(v, Path) else v

    @field_validator("minimum_severity")
    @classmethod
    def validate_minimum_severity(cls, v):
        """Only the predefined severities can be used as threshold."""
        severity = Severity.value_of(v, None)
        if severity is None:
            severity = Severity.value_of(v.upper(), None)
        if severity is None:
            names = ", ".join(s.name for s in Severity.get_predefined_values())
            raise ValueError(f"Unknown minimum severity '{v}', expected one of {names}")
        return severity.name

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure the log level is a standard level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def threshold(self) -> Severity:
        """Get the minimum severity as Severity instance."""
        return Severity.value_of(self.minimum_severity)

    @classmethod
    def from_cli_args(cls, args: dict[str, Any]) -> "AnalysisConfig":
        """Create configuration from CLI arguments."""
        reader = ReaderConfig()
        if args.get("no_detect"):
            reader.detect_encoding = False

        log_level = "DEBUG" if args.get("verbose") else "WARNING"

        return cls(
            parser_id=args["parser"],
            input_file=args["input"],
            minimum_severity=args.get("min_severity") or "LOW",
            encoding=args.get("encoding"),
            reader=reader,
            log_level=log_level,
            quiet=args.get("quiet", False),
        )

    def validate_paths(self) -> list[str]:
        """Validate that the input file exists and is a regular file."""
        errors = []
        if not self.input_file.exists():
            errors.append(f"Input file does not exist: {self.input_file}")
        elif not self.input_file.is_file():
            errors.append(f"Input path is not a file: {self.input_file}")
        return errors
