"""
Parser for MSBuild and PcLint compiler warnings.
"""

import re
from typing import Optional

from ..core.builder import FindingBuilder, is_absolute_path
from ..core.parser import ANT_TASK, RegexpLineParser
from ..models.finding import NO_FILE, UNKNOWN_FILE, FindingRecord
from ..models.severity import Severity

MSBUILD_WARNING_PATTERN = (
    r"(?:^(?:.*)Command line warning (?P<cl_category>[A-Za-z0-9]+):\s*"
    r"(?P<cl_message>.*)\s*\[(?P<cl_project>.*)\])|"
    + ANT_TASK
    + r"(?:(?:\s*\d+>)?(?:(?:(?:(?P<file>.*)\((?P<line>\d*)(?:,(?P<column>\d+))?.*\)"
    r"|.*LINK)\s*:|(?P<bare_file>.*):)"
    r"\s*(?P<kind>[A-Za-z_-]*\s?(?:[Nn]ote|[Ii]nfo|[Ww]arning|(?:fatal\s*)?[Ee]rror))"
    r"\s*:?\s*(?P<category>[A-Za-z0-9\-_]+)"
    r"\s*:\s(?:\s*(?P<type>[A-Za-z0-9.]+)\s*:)?\s*(?P<message>.*?)"
    r"(?: \[(?P<project_dir>[^\]]*)[/\\][^\]\\]+\])?"
    r"|(?P<link_file>.*)\s*:.*error\s*(?P<link_category>LNK[0-9]+):\s*"
    r"(?P<link_message>.*)))$"
)

# Emitted by MSBuild with /consoleloggerparameters:ForceConsoleColor
ANSI_ESCAPE = re.compile(r"\x1b\[[;\d]*[ -/]*[@-~]")

MSBUILD_SENTINEL = "MSBUILD"
"""MSBuild reports itself as file name for findings without a file."""

_KEYWORDS = ("note", "info", "warning", "error")


class MsBuildParser(RegexpLineParser):
    """Parses the warnings of MSBuild, the Visual Studio compilers and PcLint."""

    parser_id = "msbuild"

    def __init__(self):
        super().__init__(MSBUILD_WARNING_PATTERN)

    def pre_process_content(self, content: str) -> str:
        return ANSI_ESCAPE.sub("", content)

    def is_line_interesting(self, line: str) -> bool:
        lowered = line.lower()
        return any(keyword in lowered for keyword in _KEYWORDS)

    def create_issue(
        self, match: re.Match, builder: FindingBuilder
    ) -> Optional[FindingRecord]:
        builder.set_file_name(self.determine_file_name(match))

        if _not_blank(match.group("cl_message")):
            return (
                builder.set_line_start(0)
                .set_category(match.group("cl_category"))
                .set_message(match.group("cl_message"))
                .set_severity(Severity.WARNING_NORMAL)
                .build_optional()
            )
        if _not_blank(match.group("link_file")):
            return (
                builder.set_line_start(0)
                .set_category(match.group("link_category"))
                .set_message(match.group("link_message"))
                .set_severity(Severity.WARNING_HIGH)
                .build_optional()
            )
        if match.group("type"):
            return (
                builder.set_line_start(match.group("line"))
                .set_column_start(match.group("column"))
                .set_category(match.group("category"))
                .set_type(match.group("type"))
                .set_message(match.group("message"))
                .set_severity(self.determine_severity(match))
                .build_optional()
            )

        category = match.group("category")
        if category == "Expected":
            return None
        return (
            builder.set_line_start(match.group("line"))
            .set_column_start(match.group("column"))
            .set_category(category)
            .set_message(match.group("message"))
            .set_severity(self.determine_severity(match))
            .build_optional()
        )

    def determine_file_name(self, match: re.Match) -> str:
        """
        Determine the file that caused the warning.

        Falls back to a quoted name in the message and finally to
        ``unknown.file``. Relative names are resolved against the project
        directory when MSBuild reports one.
        """
        file_name = next(
            (
                match.group(group)
                for group in ("cl_project", "bare_file", "link_file")
                if _not_blank(match.group(group))
            ),
            match.group("file"),
        )
        if not _not_blank(file_name):
            file_name = _substring_between(match.group("message"), "'")
        if not _not_blank(file_name):
            file_name = UNKNOWN_FILE

        project_dir = match.group("project_dir")
        if self._can_resolve_relative_file_name(file_name, project_dir):
            file_name = _concat(project_dir, file_name)
        if file_name.strip() == MSBUILD_SENTINEL:
            file_name = NO_FILE
        return file_name

    def determine_severity(self, match: re.Match) -> Severity:
        """Map the kind of the warning onto a severity."""
        kind = (match.group("kind") or "").lower()
        if "note" in kind or "info" in kind:
            return Severity.WARNING_LOW
        if "warning" in kind:
            return Severity.WARNING_NORMAL
        return Severity.WARNING_HIGH

    @staticmethod
    def _can_resolve_relative_file_name(
        file_name: str, project_dir: Optional[str]
    ) -> bool:
        return (
            _not_blank(project_dir)
            and not is_absolute_path(file_name.strip())
            and file_name.strip() != MSBUILD_SENTINEL
        )


def _not_blank(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def _substring_between(text: Optional[str], quote: str) -> Optional[str]:
    if not text:
        return None
    start = text.find(quote)
    if start < 0:
        return None
    end = text.find(quote, start + 1)
    if end < 0:
        return None
    return text[start + 1 : end]


def _concat(directory: str, file_name: str) -> str:
    separator = "\\" if "\\" in directory else "/"
    return directory.rstrip("/\\") + separator + file_name.strip()
