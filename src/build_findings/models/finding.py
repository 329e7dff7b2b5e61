"""
Finding record models and validation.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .severity import Severity

UNKNOWN_FILE = "unknown.file"
"""File name used when a parser could not determine the affected file."""

NO_FILE = "-"
"""File name of findings that do not belong to any file."""


class FindingRecord(BaseModel):
    """Represents one finding reported by a build or analysis tool."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file_name: str = Field(default=UNKNOWN_FILE, description="Affected file")
    line_start: int = Field(default=0, ge=0, description="First line, 0 if unknown")
    line_end: int = Field(default=0, ge=0, description="Last line, 0 if unknown")
    column_start: int = Field(default=0, ge=0, description="First column, 0 if unknown")
    column_end: int = Field(default=0, ge=0, description="Last column, 0 if unknown")
    category: str = Field(default="", description="Tool specific category")
    type: str = Field(default="", description="Rule or warning type identifier")
    message: str = Field(default="", description="Finding message")
    description: str = Field(default="", description="Detailed description")
    severity: Severity = Field(
        default=Severity.WARNING_NORMAL, description="Normalized severity"
    )
    package_name: str = Field(default="", description="Package or namespace")
    module_name: str = Field(default="", description="Module or project")
    origin: str = Field(default="", description="ID of the parser that created it")
    additional_properties: Optional[str] = Field(
        default=None, description="Opaque parser specific payload"
    )

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v):
        """Ensure the file name is never blank."""
        if not v or not v.strip():
            raise ValueError("File name must not be blank")
        return v

    @field_validator("severity", mode="before")
    @classmethod
    def validate_severity(cls, v):
        """Only accept Severity instances."""
        if not isinstance(v, Severity):
            raise ValueError(f"Not a severity: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_ranges(self):
        """Ensure end positions are not before start positions."""
        if self.line_end and self.line_end < self.line_start:
            raise ValueError("End line must be >= start line")
        if (
            self.line_start == self.line_end
            and self.column_end
            and self.column_end < self.column_start
        ):
            raise ValueError("End column must be >= start column")
        return self

    @property
    def base_name(self) -> str:
        """Get the file name without its directory."""
        return self.file_name.rsplit("/", 1)[-1]

    @property
    def has_location(self) -> bool:
        """Check if the finding points to a line in a real file."""
        return self.line_start > 0 and self.file_name not in (UNKNOWN_FILE, NO_FILE)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with the severity as plain name."""
        data = self.model_dump()
        data["severity"] = self.severity.name
        return data

    def __str__(self) -> str:
        location = self.file_name
        if self.line_start:
            location += f"({self.line_start}"
            if self.column_start:
                location += f",{self.column_start}"
            location += ")"
        prefix = f"{self.category}: " if self.category else ""
        return f"{location}: [{self.severity}] {prefix}{self.message}"
