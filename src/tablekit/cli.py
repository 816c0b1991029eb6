"""Command-line front end for converting and inspecting tables.

Usage:
    tablekit convert table.md --to html
    cat table.html | tablekit convert --to json
    tablekit analyze table.md
    tablekit stats table.md --column 2
"""

import argparse
import logging
import sys
from pathlib import Path

from tablekit.analysis import analyze, get_column_stats
from tablekit.config import DEFAULT_OUTPUT_FORMAT, LOG_LEVEL
from tablekit.errors import TableError
from tablekit.pipeline import parse, serialize
from tablekit.schema import OutputFormat

logger = logging.getLogger(__name__)


def _read_input(source: str) -> str:
    """Read table text from a file path, or from stdin when *source* is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tablekit", description="Convert tables between Markdown, HTML and JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert_cmd = sub.add_parser("convert", help="Parse a Markdown/HTML table and print it in another format")
    convert_cmd.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")
    convert_cmd.add_argument(
        "--to",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )

    analyze_cmd = sub.add_parser("analyze", help="Print checked/total counts per column")
    analyze_cmd.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")

    stats_cmd = sub.add_parser("stats", help="Print statistics for one column")
    stats_cmd.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")
    stats_cmd.add_argument("--column", type=int, default=0, help="Zero-based column index (default: 0)")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        model = parse(_read_input(args.source))
    except (TableError, OSError) as exc:
        logger.error("Could not read table from %s: %s", args.source, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "convert":
        print(serialize(model, args.fmt))
    elif args.command == "analyze":
        print(analyze(model))
    else:
        stats = get_column_stats(model, args.column)
        if stats is None:
            print(f"error: column {args.column} out of range (table has {model.column_count})", file=sys.stderr)
            return 1
        print(stats.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
