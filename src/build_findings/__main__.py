#!/usr/bin/env python3
"""
Command line entry point: parse one tool report and print its findings.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from .io.reader import ReaderFactory
from .models.config import AnalysisConfig
from .models.report import Report
from .parsers.registry import default_registry
from .utils.exceptions import ConfigurationError, FindingExtractionError, ParsingError
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    registry = default_registry()
    parser = argparse.ArgumentParser(
        prog="build-findings",
        description="Extract findings from compiler, linter and documentation tool output",
    )
    parser.add_argument(
        "parser",
        help=f"Parser to use ({', '.join(registry.ids)})",
    )
    parser.add_argument("input", type=Path, help="Tool output file to parse")
    parser.add_argument(
        "--min-severity",
        default="LOW",
        help="Lowest severity to report: ERROR, HIGH, NORMAL or LOW (default: LOW)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the input file (default: detected)",
    )
    parser.add_argument(
        "--no-detect",
        action="store_true",
        help="Do not detect the encoding, use UTF-8 with replacement",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only print the summary",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(config: AnalysisConfig) -> Report:
    """Parse the configured input file and filter by minimum severity."""
    errors = config.validate_paths()
    if errors:
        raise ConfigurationError(
            "; ".join(errors), config_field="input_file", config_value=config.input_file
        )

    parser = default_registry().create(config.parser_id)
    reader = ReaderFactory(
        config.input_file.read_bytes(),
        file_name=str(config.input_file),
        encoding=config.encoding,
        config=config.reader,
    )
    if not parser.accepts(reader):
        raise ParsingError(
            f"Input is not a {config.parser_id} report", file_name=str(config.input_file)
        )
    report = parser.parse(reader)
    logger.info(
        f"Parsed {config.input_file} with {config.parser_id}: {len(report)} findings"
    )
    return report.filter_by_severity(config.threshold)


def print_report(report: Report, quiet: bool = False) -> None:
    if not quiet:
        for finding in report:
            print(finding)

    stats = report.get_statistics()
    print(f"Total: {stats.total}")
    for name, count in stats.severity_counts.items():
        print(f"  {name}: {count}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = AnalysisConfig.from_cli_args(vars(args))
    except PydanticValidationError as e:
        print(f"Error: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level)

    try:
        report = run(config)
    except FindingExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read {config.input_file}: {e}", file=sys.stderr)
        return 1

    print_report(report, quiet=config.quiet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
