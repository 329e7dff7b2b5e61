"""
Builder that turns raw parser captures into validated finding records.
"""

import re
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.finding import UNKNOWN_FILE, FindingRecord
from ..models.severity import Severity
from ..utils.exceptions import ValidationError
from ..utils.logging import LoggerMixin

_ABSOLUTE_PATH = re.compile(r"^(?:[/\\~]|[A-Za-z]:)")

Position = Union[int, str, None]


def parse_position(value: Position) -> int:
    """
    Parse a line or column number leniently.

    Blank or unparsable text and negative numbers in text resolve to 0.
    Integers are passed through unchanged so that the record validation can
    reject negative values.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("Positions must be integers or strings")
    if isinstance(value, int):
        return value
    try:
        number = int(str(value).strip())
    except ValueError:
        return 0
    return max(number, 0)


def normalize_file_name(file_name: Optional[str]) -> str:
    """Strip whitespace and use forward slashes as separator."""
    if file_name is None:
        return ""
    return file_name.strip().replace("\\", "/")


def is_absolute_path(file_name: str) -> bool:
    """Check for a Unix, home or Windows drive prefix."""
    return bool(_ABSOLUTE_PATH.match(file_name))


class FindingBuilder(LoggerMixin):
    """
    Mutable accumulator for the fields of one finding.

    All setters return the builder so calls can be chained. ``build`` does not
    reset the fields; call ``reset`` or use a new builder per finding.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> "FindingBuilder":
        """Clear all fields."""
        self._file_name: Optional[str] = None
        self._directory: Optional[str] = None
        self._line_start: int = 0
        self._line_end: int = 0
        self._column_start: int = 0
        self._column_end: int = 0
        self._category: Optional[str] = None
        self._type: Optional[str] = None
        self._message: Optional[str] = None
        self._description: Optional[str] = None
        self._severity: Optional[Severity] = None
        self._package_name: Optional[str] = None
        self._module_name: Optional[str] = None
        self._origin: Optional[str] = None
        self._additional_properties: Optional[str] = None
        return self

    def set_file_name(self, file_name: Optional[str]) -> "FindingBuilder":
        self._file_name = file_name
        return self

    def set_directory(self, directory: Optional[str]) -> "FindingBuilder":
        """Set the base directory used to resolve relative file names."""
        self._directory = directory
        return self

    def set_line_start(self, line: Position) -> "FindingBuilder":
        self._line_start = parse_position(line)
        return self

    def set_line_end(self, line: Position) -> "FindingBuilder":
        self._line_end = parse_position(line)
        return self

    def set_column_start(self, column: Position) -> "FindingBuilder":
        self._column_start = parse_position(column)
        return self

    def set_column_end(self, column: Position) -> "FindingBuilder":
        self._column_end = parse_position(column)
        return self

    def set_category(self, category: Optional[str]) -> "FindingBuilder":
        self._category = category
        return self

    def set_type(self, type: Optional[str]) -> "FindingBuilder":
        self._type = type
        return self

    def set_message(self, message: Optional[str]) -> "FindingBuilder":
        self._message = message
        return self

    def set_description(self, description: Optional[str]) -> "FindingBuilder":
        self._description = description
        return self

    def set_severity(self, severity: Optional[Severity]) -> "FindingBuilder":
        self._severity = severity
        return self

    def guess_severity(self, text: Optional[str]) -> "FindingBuilder":
        """Set the severity from free text, see Severity.guess_from_string."""
        self._severity = Severity.guess_from_string(text)
        return self

    def set_package_name(self, package_name: Optional[str]) -> "FindingBuilder":
        self._package_name = package_name
        return self

    def set_module_name(self, module_name: Optional[str]) -> "FindingBuilder":
        self._module_name = module_name
        return self

    def set_origin(self, origin: Optional[str]) -> "FindingBuilder":
        self._origin = origin
        return self

    def set_additional_properties(self, properties: Optional[str]) -> "FindingBuilder":
        self._additional_properties = properties
        return self

    @property
    def origin(self) -> Optional[str]:
        return self._origin

    def copy(self, finding: FindingRecord) -> "FindingBuilder":
        """Initialise all fields from an existing finding."""
        self.reset()
        self._file_name = finding.file_name
        self._line_start = finding.line_start
        self._line_end = finding.line_end
        self._column_start = finding.column_start
        self._column_end = finding.column_end
        self._category = finding.category
        self._type = finding.type
        self._message = finding.message
        self._description = finding.description
        self._severity = finding.severity
        self._package_name = finding.package_name
        self._module_name = finding.module_name
        self._origin = finding.origin
        self._additional_properties = finding.additional_properties
        return self

    def build(self) -> FindingRecord:
        """
        Create a finding from the current fields.

        Raises:
            ValidationError: If the fields violate the record invariants
        """
        line_start, line_end = self._ordered(self._line_start, self._line_end)
        column_start, column_end = self._column_start, self._column_end
        if line_start == line_end:
            column_start, column_end = self._ordered(column_start, column_end)
        elif not column_end:
            column_end = column_start

        try:
            return FindingRecord(
                file_name=self._resolve_file_name(),
                line_start=line_start,
                line_end=line_end,
                column_start=column_start,
                column_end=column_end,
                category=_text(self._category),
                type=_text(self._type),
                message=_text(self._message),
                description=_text(self._description),
                severity=self._severity or Severity.WARNING_NORMAL,
                package_name=_text(self._package_name),
                module_name=_text(self._module_name),
                origin=_text(self._origin),
                additional_properties=self._additional_properties,
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise ValidationError(
                f"Invalid finding: {first.get('msg')}",
                field=field or None,
                value=first.get("input"),
            ) from e

    def build_optional(self) -> Optional[FindingRecord]:
        """Create a finding, or return None if the fields are not valid."""
        try:
            return self.build()
        except ValidationError as e:
            self.log_debug("Skipped invalid finding", error=str(e))
            return None

    def _resolve_file_name(self) -> str:
        file_name = normalize_file_name(self._file_name)
        if not file_name:
            return UNKNOWN_FILE
        directory = normalize_file_name(self._directory).rstrip("/")
        if directory and not is_absolute_path(file_name):
            return f"{directory}/{file_name}"
        return file_name

    @staticmethod
    def _ordered(start: int, end: int) -> tuple[int, int]:
        if end == 0:
            return start, start
        if 0 <= end < start:
            return end, start
        return start, end


def _text(value: Optional[str]) -> str:
    return value.strip() if value is not None else ""
