"""
Custom exceptions for the build findings extractor.
"""

from typing import Any, Optional


class FindingExtractionError(Exception):
    """Base exception for finding extraction errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ValidationError(FindingExtractionError):
    """Exception raised when a finding record violates its invariants."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ParsingError(FindingExtractionError):
    """Exception raised when a report cannot be parsed at all."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        file_name: Optional[str] = None,
    ):
        details = {}
        if file_name:
            details["file_name"] = file_name
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message, details)
        self.cause = cause
        self.file_name = file_name


class PatternMatchError(FindingExtractionError):
    """Exception raised when a parser pattern cannot be compiled."""

    def __init__(self, message: str, pattern_name: Optional[str] = None):
        details = {}
        if pattern_name:
            details["pattern_name"] = pattern_name
        super().__init__(message, details)
        self.pattern_name = pattern_name


class ConfigurationError(FindingExtractionError):
    """Exception raised when configuration is invalid."""

    def __init__(
        self, message: str, config_field: Optional[str] = None, config_value: Any = None
    ):
        details = {}
        if config_field:
            details["config_field"] = config_field
        if config_value is not None:
            details["config_value"] = str(config_value)
        super().__init__(message, details)
        self.config_field = config_field
        self.config_value = config_value

