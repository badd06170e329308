"""
Generate a file of (roughly) a given size filled with random content.

Usage:
  sizefill --path out.bin --size 5m
  sizefill -p notes.txt -s 123.4k --deviation 0.2 --limit-charset
  sizefill -p - -s 1k > blob.bin
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sizefill.content.providers import get_provider
from sizefill.core.config import get_settings
from sizefill.core.logging import get_logger, setup_logging
from sizefill.generator import OverwriteDeclined, generate_file
from sizefill.size.errors import InvalidDeviation, ParseFailure
from sizefill.size.resolver import SizeResolver, validate_deviation

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="sizefill", description="Generate a file of a given size with random content"
    )
    parser.add_argument("-p", "--path", required=True, help="Destination file, '-' for stdout")
    parser.add_argument(
        "-s", "--size", required=True, help="Size like 123, 5k, 123.4m or 1,5g (k/m/g are powers of 1000)"
    )
    parser.add_argument(
        "--deviation",
        type=float,
        default=settings.default_deviation,
        help="Randomize unspecified digits by up to this fraction of their granularity [0..1)",
    )
    parser.add_argument("-o", "--overwrite", action="store_true", help="Replace an existing file without asking")
    parser.add_argument(
        "-l", "--limit-charset", action="store_true", help="Only write printable characters"
    )
    parser.add_argument(
        "-d",
        "--always-use-default",
        action="store_true",
        help="Use the default pseudo-random generator instead of OS entropy for binary content",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override SIZEFILL_LOG_LEVEL",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.app_version}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(component="cli", level=args.log_level)
    log = get_logger("cli")

    try:
        deviation = validate_deviation(args.deviation)
    except InvalidDeviation as e:
        print(f"Invalid deviation: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        size = SizeResolver().resolve(args.size, deviation)
    except ParseFailure as e:
        log.warning(f"Rejected size {args.size!r} ({e.kind.value})")
        print(f"Invalid size '{args.size}': {e}", file=sys.stderr)
        return EXIT_USAGE

    provider = get_provider(args.limit_charset, args.always_use_default)
    try:
        generate_file(args.path, size, provider, overwrite=args.overwrite)
    except OverwriteDeclined:
        print("Aborting.", file=sys.stderr)
        return EXIT_FAILED
    except OSError as e:
        log.error(f"Failed to write {args.path}: {e}")
        kind = type(e).__name__.upper()
        print(f"[{kind}] An error occured whilst trying to open file '{args.path}'.", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
