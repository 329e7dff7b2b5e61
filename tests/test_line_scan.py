import re

import pytest

from build_findings.core.parser import RegexpDocumentParser, RegexpLineParser
from build_findings.models.config import ReaderConfig
from build_findings.models.severity import Severity
from build_findings.utils.exceptions import PatternMatchError


class ColonParser(RegexpLineParser):
    """Parses ``file:line: [category] message`` lines."""

    parser_id = "colon"

    def __init__(self, pattern=r"^(?P<file>[^:\s]+):(?P<line>\d+):\s*(?:\[(?P<category>\w+)\]\s*)?(?P<message>.*)$"):
        super().__init__(pattern)
        self.pre_processed = False

    def pre_process_content(self, content):
        self.pre_processed = True
        return content.replace("WARN", "warning")

    def is_line_interesting(self, line):
        return not line.startswith("#")

    def create_issue(self, match, builder):
        if match.group("message") == "ignore me":
            return None
        if match.group("category"):
            builder.set_category(match.group("category"))
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("line"))
            .set_message(match.group("message"))
            .guess_severity(match.group("message"))
            .build()
        )


class BlockParser(RegexpDocumentParser):
    """Parses two line blocks: ``ERROR in <file>`` followed by the location."""

    parser_id = "block"

    def __init__(self):
        super().__init__(
            r"^ERROR in (?P<file>\S+)\n\s+line (?P<line>\d+): (?P<message>.*)$"
        )

    def create_issue(self, match, builder):
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("line"))
            .set_message(match.group("message"))
            .set_severity(Severity.ERROR)
            .build()
        )


def test_single_matching_line(make_reader):
    """Only the matching line of a two line input produces a finding."""
    report = ColonParser().parse(make_reader("build started\nmain.c:12: WARN unused\n"))

    assert len(report) == 1
    finding = report[0]
    assert finding.file_name == "main.c"
    assert finding.line_start == 12
    assert finding.message == "warning unused"
    assert finding.severity is Severity.WARNING_NORMAL
    assert finding.origin == "colon"


def test_no_match_gives_empty_report(make_reader):
    parser = ColonParser()
    report = parser.parse(make_reader("nothing to see\nhere either\n"))

    assert report.is_empty
    assert parser.pre_processed


def test_empty_input(make_reader):
    assert len(ColonParser().parse(make_reader(""))) == 0


def test_invalid_pattern_fails_on_construction():
    with pytest.raises(PatternMatchError) as exc_info:
        ColonParser(pattern=r"(?P<file>[unclosed")
    assert exc_info.value.pattern_name == "ColonParser"


def test_uninteresting_lines_and_none_results_are_skipped(make_reader):
    content = "# a.c:1: commented out\nb.c:2: ignore me\nc.c:3: error here\n"

    report = ColonParser().parse(make_reader(content))

    assert [f.file_name for f in report] == ["c.c"]
    assert report[0].severity is Severity.ERROR


def test_fields_do_not_leak_between_matches(make_reader):
    """Each match starts with a fresh builder."""
    content = "a.c:1: [Style] first\nb.c:2: second\n"

    report = ColonParser().parse(make_reader(content))

    assert [f.category for f in report] == ["Style", ""]


def test_findings_keep_input_order(make_reader):
    content = "\n".join(f"f{i}.c:{i}: msg {i}" for i in range(1, 6))

    report = ColonParser().parse(make_reader(content))

    assert [f.line_start for f in report] == [1, 2, 3, 4, 5]


def test_crlf_input_is_scanned_by_line(make_reader):
    report = ColonParser().parse(make_reader(b"a.c:1: one\r\nb.c:2: two\r\n"))

    assert [f.message for f in report] == ["one", "two"]


def test_document_parser_matches_across_lines(make_reader):
    content = (
        "compiling\n"
        "ERROR in src/a.ts\n"
        "    line 4: missing semicolon\n"
        "ERROR in src/b.ts\n"
        "    line 9: unknown type\n"
    )

    report = BlockParser().parse(make_reader(content))

    assert [(f.file_name, f.line_start) for f in report] == [
        ("src/a.ts", 4),
        ("src/b.ts", 9),
    ]
    assert BlockParser().pattern.flags & re.MULTILINE


def test_parser_instance_can_be_reused(make_reader):
    parser = ColonParser()

    first = parser.parse(make_reader("a.c:1: one\n"))
    second = parser.parse(make_reader("b.c:2: two\n"))

    assert [f.file_name for f in first] == ["a.c"]
    assert [f.file_name for f in second] == ["b.c"]


def test_only_line_feeds_separate_lines(make_reader):
    content = "a.c:1: see\x0cmore\x85and end\nb.c:2: next\n"

    report = ColonParser().parse(make_reader(content))

    assert [f.message for f in report] == ["see\x0cmore\x85and end", "next"]


def test_carriage_returns_are_dropped_when_line_endings_are_kept(make_reader):
    config = ReaderConfig(normalize_line_endings=False)

    report = ColonParser().parse(make_reader("a.c:1: one\r\nb.c:2: two\r\n", config=config))

    assert [f.message for f in report] == ["one", "two"]
