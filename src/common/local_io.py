"""Local file I/O utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def read_bytes_local(path: str | Path) -> bytes:
    """Read a local file fully into memory.

    Raises:
        OSError: If the file cannot be read.
    """
    filepath = Path(path)
    data = filepath.read_bytes()
    logger.info("Read %d bytes from %s", len(data), filepath)
    return data


def write_bytes_local(data: bytes, path: Optional[str | Path] = None) -> None:
    """Write bytes to a local file, or to stdout when no path is given.

    Raises:
        OSError: If the destination cannot be written.
    """
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        logger.info("Wrote %d bytes to stdout", len(data))
        return

    filepath = Path(path)
    filepath.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), filepath)
