"""Datetime utilities."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

# Tried in order, first match wins. %z accepts "Z", "+HH:MM" and "+HHMM",
# so these cover both the colon and compact offset forms Blogger emits.
BLOGGER_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)


def parse_blogger_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a Blogger timestamp such as ``2016-02-24T16:39:00.000-05:00``.

    Returns None when the value matches none of the accepted formats.
    """
    if not value:
        return None
    text = value.strip()
    for fmt in BLOGGER_TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_iso_millis(dt: datetime) -> str:
    """Format a datetime as ISO-8601 with milliseconds and an explicit offset."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    text = dt.isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def normalize_timestamp(value: Optional[str], now: Optional[datetime] = None) -> str:
    """Normalize a Blogger timestamp, falling back to the current time.

    Args:
        value: Raw timestamp string from the feed.
        now: Fallback time used when parsing fails (default: current UTC time).

    Returns:
        ISO-8601 string with millisecond precision.
    """
    parsed = parse_blogger_timestamp(value)
    if parsed is None:
        fallback = now or datetime.now(timezone.utc)
        logger.warning("Unparseable timestamp %r, substituting %s", value, fallback.isoformat())
        return format_iso_millis(fallback)
    return format_iso_millis(parsed)
