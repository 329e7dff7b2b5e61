"""
Adapters for parsers that produce structured violations.
"""

from .base import (
    AbstractViolationAdapter,
    Violation,
    ViolationSeverity,
    ViolationsParser,
)
from .docfx import DocFxAdapter, DocFxParser

__all__ = [
    "AbstractViolationAdapter",
    "Violation",
    "ViolationSeverity",
    "ViolationsParser",
    "DocFxAdapter",
    "DocFxParser",
]
