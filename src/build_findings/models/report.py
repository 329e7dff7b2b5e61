"""
Report model: the ordered findings of one parse call.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Optional, Union

from ..utils.logging import LoggerMixin
from .finding import FindingRecord
from .severity import Severity, SeverityStats


class Report(LoggerMixin):
    """
    Ordered, append-only collection of findings.

    Findings are kept in insertion order; nothing is sorted or deduplicated.
    Parsers may also attach informational and error messages that describe
    the parse run itself.
    """

    def __init__(self, findings: Optional[Iterable[FindingRecord]] = None):
        self._findings: list[FindingRecord] = []
        self._info_messages: list[str] = []
        self._error_messages: list[str] = []
        if findings:
            self.add_all(findings)

    def add(self, finding: FindingRecord) -> "Report":
        """Append a finding."""
        if not isinstance(finding, FindingRecord):
            raise TypeError(f"Not a finding record: {finding!r}")
        self._findings.append(finding)
        return self

    def add_all(self, findings: Iterable[FindingRecord]) -> "Report":
        """Append all findings, keeping their order."""
        for finding in findings:
            self.add(finding)
        return self

    def __iter__(self) -> Iterator[FindingRecord]:
        return iter(self._findings)

    def __len__(self) -> int:
        return len(self._findings)

    def __getitem__(self, index: Union[int, slice]):
        return self._findings[index]

    def __bool__(self) -> bool:
        return bool(self._findings)

    @property
    def findings(self) -> tuple[FindingRecord, ...]:
        """Get a read-only view of the findings."""
        return tuple(self._findings)

    @property
    def is_empty(self) -> bool:
        return not self._findings

    def filter(self, predicate: Callable[[FindingRecord], bool]) -> "Report":
        """Get a new report with the findings that satisfy the predicate."""
        filtered = Report(f for f in self._findings if predicate(f))
        filtered._info_messages = list(self._info_messages)
        filtered._error_messages = list(self._error_messages)
        return filtered

    def filter_by_severity(self, minimum: Severity) -> "Report":
        """Get a new report with the findings at or above the minimum severity."""
        accepted = set(Severity.collect_severities_from(minimum))
        return self.filter(lambda finding: finding.severity in accepted)

    def size_of(self, severity: Severity) -> int:
        """Count the findings with the given severity."""
        return sum(1 for finding in self._findings if finding.severity == severity)

    def get_statistics(self) -> SeverityStats:
        """Calculate the severity distribution of the findings."""
        stats = SeverityStats()
        for finding in self._findings:
            stats.add_severity(finding.severity)
        return stats

    def log_info(self, message: str, **kwargs) -> None:
        """Record an informational message about the parse run."""
        self._info_messages.append(message)
        super().log_info(message, **kwargs)

    def log_parse_error(self, message: str, **kwargs) -> None:
        """Record an error message about the parse run."""
        self._error_messages.append(message)
        self.log_warning(message, **kwargs)

    @property
    def info_messages(self) -> tuple[str, ...]:
        return tuple(self._info_messages)

    @property
    def error_messages(self) -> tuple[str, ...]:
        return tuple(self._error_messages)

    def __repr__(self) -> str:
        return f"Report(findings={len(self._findings)})"
