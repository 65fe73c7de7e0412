"""CLI for converting a Blogger export into a Ghost import file."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from common.cli_helpers import setup_logging
from convert_blogger.convert_blogger import convert_blogger
from convert_blogger.errors import ConversionError, UsageError
from convert_blogger.helpers import parse_convert_blogger_args

logger = logging.getLogger(__name__)


def run(argv: Sequence[str] | None = None) -> int:
    """Run the conversion and return the process exit code."""
    setup_logging()

    try:
        args = parse_convert_blogger_args(argv)
        convert_blogger(args.input, args.output)
    except UsageError as exc:
        if exc.detail:
            logger.debug("Argument error: %s", exc.detail)
        logger.error("Error: %s", exc)
        return 1
    except ConversionError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
