"""
Parser and adapter for DocFX build logs.

DocFX writes its log as one JSON object per line, e.g.::

    {"message":"Invalid file link:(~/a.md).","source":"Build Document.LinkPhaseHandler",
     "file":"articles/intro.md","line":12,"message_severity":"warning","code":"InvalidFileLink"}
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ...io.reader import ReaderFactory
from ...models.finding import NO_FILE
from ...utils.exceptions import ParsingError
from .base import AbstractViolationAdapter, Violation, ViolationSeverity, ViolationsParser


class DocFxEntry(BaseModel):
    """One entry of a DocFX build log."""

    model_config = ConfigDict(extra="ignore")

    message: str = Field(default="", description="Log message")
    source: str = Field(default="", description="DocFX component that logged it")
    file: Optional[str] = Field(default=None, description="Affected document")
    line: Optional[int] = Field(default=None, description="Line in the document")
    message_severity: str = Field(default="info", description="DocFX log level")
    code: str = Field(default="", description="DocFX message code")

    @property
    def severity(self) -> ViolationSeverity:
        level = self.message_severity.lower()
        if level == "error":
            return ViolationSeverity.ERROR
        if level == "warning":
            return ViolationSeverity.WARN
        return ViolationSeverity.INFO


class DocFxParser(ViolationsParser):
    """Parses DocFX JSON logs, either line-delimited or as a JSON array."""

    def parse_report_output(self, content: str) -> list[Violation]:
        violations = []
        for raw in self._load_entries(content):
            try:
                entry = DocFxEntry.model_validate(raw)
            except PydanticValidationError as e:
                raise ParsingError("Invalid DocFX log entry", cause=e) from e
            violations.append(
                Violation(
                    file=entry.file or NO_FILE,
                    message=entry.message,
                    severity=entry.severity,
                    start_line=entry.line or 0,
                    rule=entry.code,
                    category=entry.source,
                    reporter="DocFX",
                )
            )
        return violations

    def _load_entries(self, content: str) -> list[Any]:
        stripped = content.strip()
        try:
            if stripped.startswith("["):
                return json.loads(stripped)
            return [json.loads(line) for line in stripped.split("\n") if line.strip()]
        except json.JSONDecodeError as e:
            raise ParsingError("Invalid JSON in DocFX log", cause=e) from e


class DocFxAdapter(AbstractViolationAdapter):
    """Converts DocFX log entries, dropping informational messages."""

    parser_id = "docfx"

    def create_parser(self) -> DocFxParser:
        return DocFxParser()

    def accepts(self, reader: ReaderFactory) -> bool:
        """Accept JSON lines or a JSON array, and empty logs."""
        stripped = reader.read_string().lstrip()
        return not stripped or stripped[0] in "[{"

    def is_valid(self, violation: Violation) -> bool:
        return violation.severity != ViolationSeverity.INFO
