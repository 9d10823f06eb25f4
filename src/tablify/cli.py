"""Command line interface: ``tablify [-f csv|json] [-c] [FILE]``."""

import argparse
import logging
import sys

from tablify import config
from tablify.decoders import InputFormat
from tablify.errors import ClipboardError, DecodeError
from tablify.pipeline import format_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_CLIPBOARD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tablify", description="Render CSV or JSON input as a table")
    parser.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in InputFormat],
        default=InputFormat.CSV.value,
        help="Input format (default: csv)",
    )
    parser.add_argument("-c", "--copy", action="store_true", help="Also copy the table as TSV to the clipboard")
    parser.add_argument("-t", "--tablefmt", default=None, help=f"tabulate table format (default: {config.TABLE_FORMAT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.file == "-":
        return _run(args, sys.stdin.buffer)
    try:
        fopen = open(args.file, "rb")  # pylint: disable=consider-using-with
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return EXIT_DECODE_ERROR
    with fopen:
        return _run(args, fopen)


def _run(args: argparse.Namespace, stream) -> int:
    """Run the pipeline on an open stream and map library errors to exit codes."""
    try:
        format_table(args.format, stream, sys.stdout, args.copy, args.tablefmt)
    except DecodeError as exc:
        logger.error("Failed to decode %s input: %s", args.format, exc)
        return EXIT_DECODE_ERROR
    except ClipboardError as exc:
        logger.error("Clipboard copy failed: %s", exc)
        return EXIT_CLIPBOARD_ERROR
    return EXIT_OK
