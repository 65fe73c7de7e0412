"""Decode a Blogger JSON feed export into source entries."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from convert_blogger.errors import NoEntriesError, ParseInputError
from convert_blogger.models import EntryContent, EntryLink, SourceEntry, Thumbnail

logger = logging.getLogger(__name__)

# Blogger wraps scalar values as {"$t": "..."}.
TEXT_KEY = "$t"


def _wrapped_text(raw: dict, key: str, required: bool = False) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        if required:
            raise ParseInputError(f"entry is missing '{key}'")
        return None
    if not isinstance(value, dict) or not isinstance(value.get(TEXT_KEY), str):
        raise ParseInputError(f"'{key}' must be an object with a string '{TEXT_KEY}'")
    return value[TEXT_KEY]


def _optional_str(raw: dict, key: str, context: str) -> Optional[str]:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise ParseInputError(f"'{context}.{key}' must be a string")
    return value


def _parse_content(raw: Any) -> Optional[EntryContent]:
    if raw is None:
        return None
    if not isinstance(raw, dict) or not isinstance(raw.get(TEXT_KEY), str):
        raise ParseInputError(f"'content' must be an object with a string '{TEXT_KEY}'")
    return EntryContent(body=raw[TEXT_KEY], type=_optional_str(raw, "type", "content"))


def _parse_links(raw: Any) -> list[EntryLink]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ParseInputError("'link' must be a list")

    links = []
    for item in raw:
        if not isinstance(item, dict):
            raise ParseInputError("'link' items must be objects")
        rel = item.get("rel")
        href = item.get("href")
        if not isinstance(rel, str) or not isinstance(href, str):
            raise ParseInputError("'link' items need string 'rel' and 'href'")
        links.append(
            EntryLink(
                rel=rel,
                href=href,
                type=_optional_str(item, "type", "link"),
                title=_optional_str(item, "title", "link"),
            )
        )
    return links


def _parse_authors(raw: Any) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ParseInputError("'author' must be a list")

    authors = []
    for item in raw:
        if not isinstance(item, dict):
            raise ParseInputError("'author' items must be objects")
        name = _wrapped_text(item, "name", required=True)
        authors.append(name)
    return authors


def _parse_thumbnail(raw: Any) -> Optional[Thumbnail]:
    if raw is None:
        return None
    if not isinstance(raw, dict) or not isinstance(raw.get("url"), str):
        raise ParseInputError("'media$thumbnail' must be an object with a string 'url'")
    return Thumbnail(
        url=raw["url"],
        height=_optional_str(raw, "height", "media$thumbnail"),
        width=_optional_str(raw, "width", "media$thumbnail"),
    )


def parse_entry(raw: Any) -> SourceEntry:
    """Build a SourceEntry from one raw Blogger feed entry."""
    if not isinstance(raw, dict):
        raise ParseInputError("feed entries must be objects")
    return SourceEntry(
        id=_wrapped_text(raw, "id", required=True),
        published=_wrapped_text(raw, "published", required=True),
        updated=_wrapped_text(raw, "updated", required=True),
        title=_wrapped_text(raw, "title"),
        content=_parse_content(raw.get("content")),
        links=_parse_links(raw.get("link")),
        authors=_parse_authors(raw.get("author")),
        thumbnail=_parse_thumbnail(raw.get("media$thumbnail")),
        comment_count=_wrapped_text(raw, "thr$total"),
    )


def load_entries(data: bytes) -> list[SourceEntry]:
    """Decode a ``{"feed": {"entry": [...]}}`` document.

    Raises:
        ParseInputError: If the bytes are not JSON of the expected shape.
        NoEntriesError: If the feed has no entries.
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseInputError(str(exc)) from exc

    if not isinstance(document, dict) or not isinstance(document.get("feed"), dict):
        raise ParseInputError("top-level 'feed' object not found")

    raw_entries = document["feed"].get("entry")
    if raw_entries is None:
        raise NoEntriesError()
    if not isinstance(raw_entries, list):
        raise ParseInputError("'feed.entry' must be a list")
    if not raw_entries:
        raise NoEntriesError()

    entries = [parse_entry(raw) for raw in raw_entries]
    logger.info("Loaded %d entries", len(entries))
    return entries
