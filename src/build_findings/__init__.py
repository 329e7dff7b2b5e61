"""
Build Findings

Extracts findings from the output of compilers, linters and documentation
generators and normalizes them into uniform finding records.
"""

__version__ = "1.0.0"

from .core.builder import FindingBuilder
from .core.parser import IssueParser, RegexpDocumentParser, RegexpLineParser
from .io.reader import ReaderFactory
from .models.finding import FindingRecord
from .models.report import Report
from .models.severity import Severity
from .parsers.registry import ParserRegistry, default_registry
from .utils.exceptions import ParsingError, ValidationError

__all__ = [
    "FindingBuilder",
    "FindingRecord",
    "IssueParser",
    "ParserRegistry",
    "ParsingError",
    "ReaderFactory",
    "RegexpDocumentParser",
    "RegexpLineParser",
    "Report",
    "Severity",
    "ValidationError",
    "default_registry",
]
