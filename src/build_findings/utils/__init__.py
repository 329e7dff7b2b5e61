"""
Utility modules for the build findings extractor.
"""

from .exceptions import (
    ConfigurationError,
    FindingExtractionError,
    ParsingError,
    PatternMatchError,
    ValidationError,
)
from .logging import LoggerMixin, get_logger, setup_logging

__all__ = [
    "FindingExtractionError",
    "ValidationError",
    "ParsingError",
    "PatternMatchError",
    "ConfigurationError",
    "LoggerMixin",
    "setup_logging",
    "get_logger",
]
