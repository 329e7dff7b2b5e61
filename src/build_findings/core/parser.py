"""
Parser protocol and the generic regex scanning engine.

Format specific parsers either implement ``IssueParser.parse`` directly (e.g.
parsers for XML reports) or subclass one of the regex engines and only supply
a pattern, an optional pre-processing step and ``create_issue``.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Optional

from ..io.reader import ReaderFactory
from ..models.finding import FindingRecord
from ..models.report import Report
from ..utils.exceptions import PatternMatchError
from ..utils.logging import LoggerMixin
from .builder import FindingBuilder

ANT_TASK = r"^(?:.*\[[^\]]*\])?\s*"
"""Skips the ``[task]`` prefix that Ant and similar tools put before each line."""


class IssueParser(ABC, LoggerMixin):
    """Abstract base class of all format parsers."""

    parser_id: str = ""
    """Short identifier stored as origin of the produced findings."""

    @abstractmethod
    def parse(self, reader: ReaderFactory) -> Report:
        """
        Parse the tool output provided by the reader.

        Raises:
            ParsingError: If the input cannot be parsed at all
        """

    def accepts(self, reader: ReaderFactory) -> bool:
        """
        Check if this parser can handle the given input.

        The check is a cheap look at the content, not a full parse. Parsers
        of free form text accept everything.
        """
        return True

    def create_builder(self) -> FindingBuilder:
        """Create a fresh builder preset with this parser's origin."""
        builder = FindingBuilder()
        if self.parser_id:
            builder.set_origin(self.parser_id)
        return builder


class RegexpParser(IssueParser):
    """
    Base class for parsers that scan text with a single regular expression.

    The pattern is compiled once per parser instance. Every match is handed
    to ``create_issue`` together with a new builder, so no field leaks from
    one finding into the next.
    """

    flags: int = 0

    def __init__(self, pattern: str, flags: Optional[int] = None):
        """Compile the pattern, failing fast on syntax errors."""
        if flags is not None:
            self.flags = flags
        try:
            self._pattern = re.compile(pattern, self.flags)
        except re.error as e:
            raise PatternMatchError(
                f"Invalid pattern for {type(self).__name__}: {e}",
                pattern_name=type(self).__name__,
            ) from e

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    def pre_process_content(self, content: str) -> str:
        """Transform the whole input once before matching."""
        return content

    @abstractmethod
    def create_issue(
        self, match: re.Match, builder: FindingBuilder
    ) -> Optional[FindingRecord]:
        """
        Create a finding from a match.

        Returns:
            The finding, or None if the match is not a finding
        """

    def parse(self, reader: ReaderFactory) -> Report:
        """Scan the input and collect the findings of all matches."""
        content = self.pre_process_content(reader.read_string())
        report = Report()
        matches = 0

        for match in self.find_matches(content):
            matches += 1
            finding = self.create_issue(match, self.create_builder())
            if finding is not None:
                report.add(finding)

        self.log_debug(
            "Scan completed",
            parser=type(self).__name__,
            file_name=reader.file_name,
            matches=matches,
            findings=len(report),
        )
        return report

    @abstractmethod
    def find_matches(self, content: str) -> Iterator[re.Match]:
        """Yield the matches of the pattern in scanning order."""


class RegexpLineParser(RegexpParser):
    """Applies the pattern to each line of the pre-processed input."""

    def is_line_interesting(self, line: str) -> bool:
        """Cheap pre-filter that skips lines before the regex is evaluated."""
        return True

    def find_matches(self, content: str) -> Iterator[re.Match]:
        # NEL, form feeds and similar characters may occur inside a line
        for line in content.split("\n"):
            line = line.rstrip("\r")
            if not self.is_line_interesting(line):
                continue
            match = self._pattern.search(line)
            if match:
                yield match


class RegexpDocumentParser(RegexpParser):
    """Applies the pattern to the whole pre-processed input at once."""

    flags = re.MULTILINE

    def find_matches(self, content: str) -> Iterator[re.Match]:
        yield from self._pattern.finditer(content)
