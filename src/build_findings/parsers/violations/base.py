"""
Adapters for parsers that already produce structured violations.

A violations parser reads one report format and returns ``Violation``
objects in its own severity vocabulary. The adapter maps those onto finding
records and decides which violations are dropped.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...core.builder import FindingBuilder
from ...core.parser import IssueParser
from ...io.reader import ReaderFactory
from ...models.finding import NO_FILE, FindingRecord
from ...models.report import Report
from ...models.severity import Severity
from ...utils.exceptions import ParsingError


class ViolationSeverity(str, Enum):
    """Severity vocabulary of the violations parsers."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Violation:
    """A violation as reported by a violations parser."""

    file: str
    message: str
    severity: ViolationSeverity
    start_line: int = 0
    end_line: int = 0
    column: int = 0
    end_column: int = 0
    rule: str = ""
    category: str = ""
    reporter: str = ""


class ViolationsParser(ABC):
    """Parses the output of one tool into violations."""

    @abstractmethod
    def parse_report_output(self, content: str) -> list[Violation]:
        """Parse the report content, raising on malformed input."""


class AbstractViolationAdapter(IssueParser):
    """Base class of the adapters that delegate to a violations parser."""

    @abstractmethod
    def create_parser(self) -> ViolationsParser:
        """Create the violations parser this adapter delegates to."""

    def is_valid(self, violation: Violation) -> bool:
        """Decide whether a violation is converted into a finding."""
        return True

    def convert_severity(self, severity: ViolationSeverity) -> Severity:
        if severity == ViolationSeverity.ERROR:
            return Severity.WARNING_HIGH
        if severity == ViolationSeverity.WARN:
            return Severity.WARNING_NORMAL
        return Severity.WARNING_LOW

    def update_builder(self, violation: Violation, builder: FindingBuilder) -> None:
        """Hook to set additional fields or override the defaults of a violation."""

    def parse(self, reader: ReaderFactory) -> Report:
        try:
            violations = self.create_parser().parse_report_output(reader.read_string())
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(
                f"{type(self).__name__} cannot parse the report",
                cause=e,
                file_name=reader.file_name,
            ) from e

        report = Report()
        skipped = 0
        for violation in violations:
            if not self.is_valid(violation):
                skipped += 1
                continue
            finding = self.convert_to_finding(violation)
            if finding is None:
                report.log_parse_error(
                    f"Skipped invalid violation of {type(self).__name__}",
                    file=violation.file,
                    line=violation.start_line,
                )
            else:
                report.add(finding)

        if skipped:
            report.log_info(f"Skipped {skipped} violations of {type(self).__name__}")
        return report

    def convert_to_finding(self, violation: Violation) -> Optional[FindingRecord]:
        """Convert a violation, or return None if it violates the record invariants."""
        builder = (
            self.create_builder()
            .set_severity(self.convert_severity(violation.severity))
            .set_file_name(violation.file or NO_FILE)
            .set_message(violation.message)
            .set_line_start(max(violation.start_line, 0))
            .set_line_end(max(violation.end_line, 0))
            .set_column_start(max(violation.column, 0))
            .set_column_end(max(violation.end_column, 0))
            .set_type(violation.rule)
            .set_category(violation.category)
        )
        self.update_builder(violation, builder)
        return builder.build_optional()
