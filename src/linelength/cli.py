"""Command-line entrypoint."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from linelength import __version__
from linelength.config import default_config
from linelength.report import write_report
from linelength.scan import LineReadError, scan_files


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for the file list."""
    parser = argparse.ArgumentParser(
        prog="linelength",
        description="Report the length and line number of the longest line in each file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help=(
            "List of files for which to compute the length of the longest line, "
            "as well as the line number."
        ),
    )
    return parser


def main(argv: Sequence[str] | None = None, out_stream: TextIO | None = None) -> int:
    """Scan every file, then print the table and any open failures."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    config = default_config()
    try:
        report = scan_files(args.files, config=config)
    except LineReadError as exc:
        raise SystemExit(str(exc)) from exc
    write_report(report, out_stream or sys.stdout, layout=config.layout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
