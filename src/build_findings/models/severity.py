"""
Severity of a finding and severity statistics.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.exceptions import ValidationError

_NO_DEFAULT = object()


class Severity:
    """
    Severity of a finding.

    The predefined set consists of an error and three warning levels (high,
    normal, low). Tools with a richer vocabulary may create additional
    severities. New instances are not cached, so several instances with the
    same name may exist; equality is decided by name only.
    """

    __slots__ = ("_name",)

    ERROR: "Severity"
    WARNING_HIGH: "Severity"
    WARNING_NORMAL: "Severity"
    WARNING_LOW: "Severity"

    def __init__(self, name: str):
        if name is None or not str(name).strip():
            raise ValidationError("Severity name must not be blank", field="name")
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key, value):
        raise AttributeError("Severity is immutable")

    @property
    def name(self) -> str:
        """Get the name of the severity."""
        return self._name

    @classmethod
    def value_of(cls, name: Optional[str], default=_NO_DEFAULT) -> "Severity":
        """
        Convert a name into a severity.

        Without ``default`` a case-insensitive match against the predefined
        names returns the predefined instance, any other name yields a new
        severity with exactly that name.

        With ``default`` only exact predefined names are converted; ``None``,
        empty and unknown names return ``default``.

        Raises:
            ValidationError: If ``name`` is ``None`` or blank and no
                ``default`` is given
        """
        if default is not _NO_DEFAULT:
            if not name or all(
                severity.name != name for severity in cls.get_predefined_values()
            ):
                return default

        for severity in cls.get_predefined_values():
            if severity.equals_ignore_case(name):
                return severity
        return cls(name)

    @classmethod
    def guess_from_string(cls, text: Optional[str]) -> "Severity":
        """Map free text onto a predefined severity, falling back to low."""
        lowered = (text or "").lower()
        if any(token in lowered for token in ("error", "severe", "critical")):
            return cls.ERROR
        if any(token in lowered for token in ("info", "note")):
            return cls.WARNING_LOW
        if "warning" in lowered:
            return cls.WARNING_NORMAL
        return cls.WARNING_LOW

    @classmethod
    def collect_severities_from(cls, minimum: "Severity") -> list["Severity"]:
        """Get the severities from ERROR down to the specified minimum."""
        severities = [cls.ERROR]
        warnings = [cls.WARNING_HIGH, cls.WARNING_NORMAL, cls.WARNING_LOW]
        if minimum in warnings:
            severities.extend(warnings[: warnings.index(minimum) + 1])
        return severities

    @classmethod
    def get_predefined_values(cls) -> tuple["Severity", ...]:
        """Get the predefined severities, most severe first."""
        return (cls.ERROR, cls.WARNING_HIGH, cls.WARNING_NORMAL, cls.WARNING_LOW)

    def equals_ignore_case(self, name: Optional[str]) -> bool:
        """Check whether this severity has the given name, ignoring case."""
        return name is not None and self._name.lower() == name.lower()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Severity({self._name!r})"

    def __reduce__(self):
        return (Severity, (self._name,))


Severity.ERROR = Severity("ERROR")
Severity.WARNING_HIGH = Severity("HIGH")
Severity.WARNING_NORMAL = Severity("NORMAL")
Severity.WARNING_LOW = Severity("LOW")


class SeverityStats(BaseModel):
    """Statistics about severity distribution."""

    total: int = Field(default=0, ge=0, description="Total number of findings")
    severity_counts: dict[str, int] = Field(
        default_factory=dict, description="Count of findings per severity name"
    )

    @field_validator("severity_counts")
    @classmethod
    def validate_counts(cls, v):
        """Ensure all counts are non-negative."""
        for severity, count in v.items():
            if count < 0:
                raise ValueError(f"Count for {severity} cannot be negative")
        return v

    @property
    def severity_percentages(self) -> dict[str, float]:
        """Calculate percentage distribution of severities."""
        if self.total == 0:
            return {}

        return {
            severity: (count / self.total) * 100
            for severity, count in self.severity_counts.items()
        }

    def add_severity(self, severity: Severity) -> None:
        """Add a severity to the statistics."""
        self.severity_counts[severity.name] = (
            self.severity_counts.get(severity.name, 0) + 1
        )
        self.total += 1

    def get_most_common_severity(self) -> Optional[str]:
        """Get the name of the most common severity."""
        if not self.severity_counts:
            return None
        return max(self.severity_counts, key=self.severity_counts.get)
