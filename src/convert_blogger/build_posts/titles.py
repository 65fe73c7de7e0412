"""Title and slug derivation for Blogger entries."""

import re

from common.utils import last_path_segment
from convert_blogger.models import SourceEntry

ALTERNATE_REL = "alternate"
UNTITLED_SLUG = "untitled"

_NON_SLUG_CHARS_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Turn a title or URL segment into a lowercase, hyphen-separated slug."""
    slug = value.lower()
    if slug.endswith(".html"):
        slug = slug[: -len(".html")]
    slug = _NON_SLUG_CHARS_RE.sub("-", slug).strip("-")
    return slug or UNTITLED_SLUG


def _alternate_segment(entry: SourceEntry) -> str:
    return last_path_segment(entry.link_href(ALTERNATE_REL))


def derive_title(entry: SourceEntry) -> str:
    """Entry title, else a title from the alternate link, else a dated fallback."""
    title = (entry.title or "").strip()
    if title:
        return title

    # "my-first-post.html" -> "my first post.html"
    segment = _alternate_segment(entry)
    if segment:
        words = segment.replace("-", " ").strip()
        if words:
            return words

    return f"Post {entry.published[:10]}"


def derive_slug(entry: SourceEntry, title: str) -> str:
    """Slug from the alternate link's last path segment, else from the title."""
    segment = _alternate_segment(entry)
    if segment:
        return slugify(segment)
    return slugify(title)
