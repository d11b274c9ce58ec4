#!/usr/bin/env python3
"""
Coordinate normalization command-line interface.

Reads a CSV of point pairs written in one notation (DD, DMS or DDM), and
writes each pair with decimal and DMS coordinates, Haversine distance and
near-equality flags.

Usage:
    $ python -m geonorm.main -i pairs.csv -o out.csv -f dms --strict
"""
import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from geonorm.config import DEFAULT_TOLERANCE_DEG
from geonorm.notation import Notation
from geonorm.pipeline import PipelineError, ProcessingConfig, ProcessingReport, process_csv

logger = logging.getLogger("geonorm")

CONSOLE = Console(stderr=True)

# skipped rows listed in the summary panel
SUMMARY_ERROR_LIMIT = 5


def build_parser():
    parser = argparse.ArgumentParser(
        description="Normalize coordinate pairs and compute great-circle distances"
    )

    parser.add_argument("-i", "--input", required=True, type=Path, help="Input CSV file path")

    parser.add_argument("-o", "--output", required=True, type=Path, help="Output CSV file path")

    parser.add_argument(
        "-f",
        "--input-format",
        required=True,
        choices=[notation.value for notation in Notation],
        help="Coordinate notation used by every row of the input",
    )

    parser.add_argument(
        "--strict", action="store_true", help="Stop on the first invalid row"
    )

    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE_DEG,
        help=f"Near-equality tolerance in degrees (default: {DEFAULT_TOLERANCE_DEG:g})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )

    parser.add_argument(
        "--summary", action="store_true", help="Print a summary panel of the run to stderr"
    )

    return parser


def render_summary(config: ProcessingConfig, report: ProcessingReport) -> Panel:
    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Notation[/b]: ", config.notation.name)
    t.add_row("[b]Mode[/b]: ", "strict" if config.strict else "permissive")
    t.add_row("[b]Rows Read[/b]: ", str(report.total))
    t.add_row("[b]Rows Written[/b]: ", str(report.written))
    t.add_row("[b]Rows Skipped[/b]: ", str(report.skipped))
    for error in report.errors[:SUMMARY_ERROR_LIMIT]:
        t.add_row(f"[b]Line {error.line}[/b]: ", error.source.kind.value)
    if report.skipped > SUMMARY_ERROR_LIMIT:
        t.add_row("", f"... and {report.skipped - SUMMARY_ERROR_LIMIT} more")

    return Panel(t, title=str(config.output_path), padding=(1, 2))


def main(argv=None):
    """
    Main entry point for the coordinate normalization command-line interface.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ProcessingConfig(
        input_path=args.input,
        output_path=args.output,
        notation=Notation.from_name(args.input_format),
        strict=args.strict,
        tolerance=args.tolerance,
    )

    try:
        report = process_csv(config)
    except PipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        # unreadable file, bad tolerance
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if report.skipped > 0:
        print(f"{report.skipped} ignored line(s)", file=sys.stderr)

    if args.summary:
        CONSOLE.print(render_summary(config, report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
