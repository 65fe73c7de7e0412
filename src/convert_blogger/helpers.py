"""Helper functions for convert_blogger CLI."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from convert_blogger.errors import USAGE, UsageError

OUTPUT_FLAGS = ("-o", "--output")


class _UsageRaisingParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def parse_convert_blogger_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for convert_blogger.

    Accepts exactly ``<input> [-o|--output <path>]``.
    '''

    args = list(sys.argv[1:] if argv is None else argv)

    # Input first, then at most one separate "-o <path>" or "--output <path>"
    if not args or args[0].startswith("-"):
        raise UsageError("input path must come first")
    if len(args) > 1 and (len(args) != 3 or args[1] not in OUTPUT_FLAGS):
        raise UsageError(f"unexpected arguments: {' '.join(args[1:])}")

    parser = _UsageRaisingParser(
        prog="blogger2ghost",
        usage=USAGE.removeprefix("Usage: "),
        description="Convert a Blogger JSON export into a Ghost import file.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("input", help="Path to the Blogger JSON export")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Destination file (default: stdout)",
    )
    return parser.parse_args(args)
