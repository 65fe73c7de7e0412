"""Plain-text extraction from post HTML."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]+>")
_DECIMAL_ENTITY_RE = re.compile(r"&#(\d+);")
_HEX_ENTITY_RE = re.compile(r"&#x([0-9a-fA-F]+);")

# &amp; goes last so an escaped entity such as "&amp;lt;" decodes only once.
NAMED_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


def _code_point(value: int) -> str | None:
    # Surrogates and out-of-range values are not Unicode scalar values.
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return None
    return chr(value)


def _replace_numeric(text: str, pattern: re.Pattern, base: int) -> str:
    # Replace from the end so earlier match offsets stay valid.
    for match in reversed(list(pattern.finditer(text))):
        try:
            value = int(match.group(1), base)
        except ValueError:
            # Digit strings past the int conversion limit
            continue
        char = _code_point(value)
        if char is None:
            continue
        text = text[: match.start()] + char + text[match.end():]
    return text


def decode_entities(text: str) -> str:
    """Decode the common named entities plus decimal and hex numeric entities."""
    for entity, char in NAMED_ENTITIES:
        text = text.replace(entity, char)
    text = _replace_numeric(text, _DECIMAL_ENTITY_RE, 10)
    text = _replace_numeric(text, _HEX_ENTITY_RE, 16)
    return text


def html_to_plaintext(html: str) -> str:
    """Strip tags, decode entities and trim surrounding whitespace."""
    if not html:
        return ""
    return decode_entities(_TAG_RE.sub("", html)).strip()
