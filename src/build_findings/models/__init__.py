"""
Data models and validation schemas for finding extraction.
"""

from .config import AnalysisConfig, ReaderConfig
from .finding import NO_FILE, UNKNOWN_FILE, FindingRecord
from .report import Report
from .severity import Severity, SeverityStats

__all__ = [
    "FindingRecord",
    "NO_FILE",
    "UNKNOWN_FILE",
    "Report",
    "Severity",
    "SeverityStats",
    "AnalysisConfig",
    "ReaderConfig",
]
