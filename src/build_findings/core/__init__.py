"""
Core building blocks shared by all parsers.

This package contains the finding builder and the regex scanning engine.
"""

from .builder import FindingBuilder, parse_position
from .parser import (
    ANT_TASK,
    IssueParser,
    RegexpDocumentParser,
    RegexpLineParser,
    RegexpParser,
)

__all__ = [
    # Builder
    "FindingBuilder",
    "parse_position",
    # Scanning engine
    "ANT_TASK",
    "IssueParser",
    "RegexpParser",
    "RegexpLineParser",
    "RegexpDocumentParser",
]
