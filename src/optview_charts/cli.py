# src/optview_charts/cli.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .constants import EXIT_FAILURE, EXIT_OK, OUTPUT_FILENAME
from .core import convert_text
from .io.exports import write_index
from .parsing.lists import ParseError
from .utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="optview-to-highcharts",
        description="Turn an opt-viewer summary list into a Highcharts pie page.",
    )
    p.add_argument("input", nargs="?", type=Path, help="opt-viewer index.html to read")
    p.add_argument(
        "--out",
        "-o",
        type=Path,
        default=Path(OUTPUT_FILENAME),
        help=f"Output path (default: ./{OUTPUT_FILENAME})",
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Verbose logs (use --debug / --no-debug).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    # Configure logging level based on --debug
    get_logger().setLevel(logging.DEBUG if args.debug else logging.INFO)

    if args.input is None:
        p.print_usage()
        return EXIT_FAILURE

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"There was a problem while reading the file {e}")
        return EXIT_FAILURE

    try:
        records, html = convert_text(text)
    except ParseError as e:
        print(e)
        return EXIT_FAILURE

    try:
        write_index(html, args.out)
    except OSError as e:
        print(f"There was a problem while writing {args.out}: {e}")
        return EXIT_FAILURE

    print(f"Wrote {len(records)} counters to {args.out}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
