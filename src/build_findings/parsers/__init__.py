"""
Format parsers for the supported tools.
"""

from .msbuild import MsBuildParser
from .registry import ParserRegistry, default_registry
from .taglist import TaglistParser
from .violations import AbstractViolationAdapter, DocFxAdapter

__all__ = [
    "MsBuildParser",
    "TaglistParser",
    "AbstractViolationAdapter",
    "DocFxAdapter",
    "ParserRegistry",
    "default_registry",
]
