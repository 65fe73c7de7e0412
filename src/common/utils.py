"""Common utility functions."""

from typing import Optional
from urllib.parse import unquote, urlsplit


def last_path_segment(url: Optional[str]) -> str:
    """Return the percent-decoded last path segment of a URL.

    Trailing slashes are ignored, so ``https://x.com/a/b/`` yields ``"b"``.
    Returns an empty string when the URL has no path segments or cannot
    be parsed.
    """
    if not url:
        return ""
    try:
        path = urlsplit(url.strip()).path.rstrip("/")
    except ValueError:
        # Malformed netloc, e.g. an unclosed IPv6 bracket
        return ""
    if not path:
        return ""
    return unquote(path.rsplit("/", 1)[-1])
