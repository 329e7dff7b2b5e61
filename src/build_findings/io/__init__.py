"""
Input modules.

The reader decodes tool output that was acquired by the caller and exposes it
as text or XML document.
"""

from .reader import ReaderFactory

__all__ = ["ReaderFactory"]
