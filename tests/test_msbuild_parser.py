import pytest

from build_findings.models.finding import NO_FILE, UNKNOWN_FILE
from build_findings.models.severity import Severity
from build_findings.parsers.msbuild import MsBuildParser


@pytest.fixture
def parse(make_reader):
    def _parse(content):
        return MsBuildParser().parse(make_reader(content, file_name="build.log"))

    return _parse


def test_compiler_warning(parse):
    report = parse(
        "Src\\Parser\\CSharp\\cs.cs(12,34): warning CS0168: "
        "The variable 'x' is declared but never used\n"
    )

    assert len(report) == 1
    finding = report[0]
    assert finding.file_name == "Src/Parser/CSharp/cs.cs"
    assert finding.line_start == 12
    assert finding.column_start == 34
    assert finding.category == "CS0168"
    assert finding.type == ""
    assert finding.message == "The variable 'x' is declared but never used"
    assert finding.severity is Severity.WARNING_NORMAL
    assert finding.origin == "msbuild"


def test_warning_with_project_number_prefix(parse):
    report = parse(
        "  1>c:\\foo\\bar.cpp(10): warning C4100: 'x': unreferenced formal parameter\n"
    )

    finding = report[0]
    assert finding.file_name == "c:/foo/bar.cpp"
    assert finding.line_start == 10
    assert finding.column_start == 0
    assert finding.category == "C4100"
    assert finding.message == "'x': unreferenced formal parameter"


def test_error_with_type(parse):
    report = parse(
        "MyClass.cs(3,1): error CA1822: Microsoft.Performance : Mark members as static\n"
    )

    finding = report[0]
    assert finding.category == "CA1822"
    assert finding.type == "Microsoft.Performance"
    assert finding.message == "Mark members as static"
    assert finding.severity is Severity.WARNING_HIGH


def test_linker_error_uses_quoted_file_from_message(parse):
    report = parse("LINK : fatal error LNK1181: cannot open input file 'xyz.lib'\n")

    finding = report[0]
    assert finding.file_name == "xyz.lib"
    assert finding.line_start == 0
    assert finding.category == "LNK1181"
    assert finding.severity is Severity.WARNING_HIGH


def test_object_file_error(parse):
    report = parse("main.obj : error LNK2019: unresolved external symbol _foo\n")

    finding = report[0]
    assert finding.file_name == "main.obj"
    assert finding.category == "LNK2019"
    assert finding.message == "unresolved external symbol _foo"
    assert finding.severity is Severity.WARNING_HIGH


def test_command_line_warning(parse):
    report = parse(
        "cl : Command line warning D9025: overriding '/W3' with '/W4' "
        "[C:\\Projects\\demo\\demo.vcxproj]\n"
    )

    finding = report[0]
    assert finding.file_name == "C:/Projects/demo/demo.vcxproj"
    assert finding.line_start == 0
    assert finding.category == "D9025"
    assert finding.message == "overriding '/W3' with '/W4'"
    assert finding.severity is Severity.WARNING_NORMAL


def test_relative_file_is_resolved_against_project(parse):
    report = parse(
        "foo.cs(1,2): warning CS0414: The field 'x' is assigned "
        "[C:\\work\\proj\\proj.csproj]\n"
    )

    finding = report[0]
    assert finding.file_name == "C:/work/proj/foo.cs"
    assert finding.message == "The field 'x' is assigned"


def test_msbuild_itself_means_no_file(parse):
    report = parse("MSBUILD : error MSB1009: Project file does not exist.\n")

    finding = report[0]
    assert finding.file_name == NO_FILE
    assert finding.category == "MSB1009"
    assert finding.message == "Project file does not exist."
    assert finding.severity is Severity.WARNING_HIGH


def test_missing_file_falls_back_to_unknown(parse):
    report = parse(": warning X123: something happened\n")

    assert report[0].file_name == UNKNOWN_FILE


def test_expected_notes_are_skipped(parse):
    assert parse("file.cpp(10): note Expected: value\n").is_empty


@pytest.mark.parametrize(
    "kind, severity",
    [
        ("note", Severity.WARNING_LOW),
        ("info", Severity.WARNING_LOW),
        ("warning", Severity.WARNING_NORMAL),
        ("error", Severity.WARNING_HIGH),
        ("fatal error", Severity.WARNING_HIGH),
    ],
)
def test_severity_from_kind(parse, kind, severity):
    report = parse(f"a.cpp(5): {kind} C1234: text\n")

    assert report[0].severity is severity


def test_ansi_colors_are_removed(parse):
    report = parse(
        "\x1b[33mfoo.cs(1,2): warning CS0168: The variable 'y' is unused\x1b[0m\n"
    )

    finding = report[0]
    assert finding.file_name == "foo.cs"
    assert finding.message == "The variable 'y' is unused"
    assert "\x1b" not in finding.message


def test_summary_lines_are_ignored(parse):
    content = (
        "Build succeeded.\n"
        "    0 Warning(s)\n"
        "    0 Error(s)\n"
        "Time Elapsed 00:00:01.23\n"
    )

    assert parse(content).is_empty


def test_log_with_several_findings_keeps_order(parse):
    content = (
        "Microsoft (R) Build Engine version 16.0\n"
        "a.cs(1,1): warning CS0001: first\n"
        "Build started.\n"
        "b.cs(2,1): error CS0002: second\n"
        "c.cs(3,1): warning CS0003: third\n"
    )

    report = parse(content)

    assert [f.category for f in report] == ["CS0001", "CS0002", "CS0003"]
    assert report.size_of(Severity.WARNING_HIGH) == 1


@pytest.mark.parametrize(
    "separator", ["\x85", "\x0c", "\x0b", "\x1c", "\u2028", "\u2029"]
)
def test_unicode_line_breaks_inside_a_line_are_kept(parse, separator):
    report = parse(
        f"dir{separator}name\\a.cs(1,2): warning CS0001: wait{separator} really done\n"
    )

    assert len(report) == 1
    assert report[0].file_name == f"dir{separator}name/a.cs"
    assert report[0].message == f"wait{separator} really done"


def test_mis_decoded_ellipsis_keeps_message(make_reader):
    content = "a.cs(1,2): warning CS0001: wait… really done\n".encode("cp1252")

    report = MsBuildParser().parse(make_reader(content, encoding="latin-1"))

    assert [f.message for f in report] == ["wait\x85 really done"]


def test_accepts_any_text(make_reader):
    assert MsBuildParser().accepts(make_reader("<report/>"))
    assert MsBuildParser().accepts(make_reader(""))
