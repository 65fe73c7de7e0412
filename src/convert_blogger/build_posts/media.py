"""Rewrite Blogger caption tables into Ghost image cards."""

from __future__ import annotations

import html as html_lib
import logging
import re
from typing import Optional

from common.utils import last_path_segment
from convert_blogger.build_posts.plaintext import html_to_plaintext
from convert_blogger.config_loader import EXTRACT_URL, MediaHostRule

logger = logging.getLogger(__name__)

# Placeholder Ghost replaces with the site URL on import.
IMAGE_BASE_PATH = "__GHOST_URL__/content/images/2025/10"

# Smallest caption-container table that does not contain another <table.
CAPTION_TABLE_RE = re.compile(
    r"""<table\b[^>]*\bclass\s*=\s*"tr-caption-container"[^>]*>(?:(?!<table\b).)*?</table>""",
    re.IGNORECASE | re.DOTALL,
)
CAPTION_CELL_RE = re.compile(
    r"""<td[^>]*class="tr-caption"[^>]*>(.*?)</td>""",
    re.IGNORECASE | re.DOTALL,
)

IMAGE_CARD_TEMPLATE = """<figure class="kg-card kg-image-card kg-card-hascaption">
\t<img
\t\tsrc="{src}"
\t\tclass="kg-image"
\t\talt=""
\t\tloading="lazy"
\t\tsrcset="{src}"
\t\tsizes="(min-width: 720px) 720px">
\t<figcaption>
\t<span style="white-space: pre-wrap;">{caption}</span>
\t</figcaption>
</figure>"""


def image_path(filename: str) -> str:
    """Path of an uploaded image under the Ghost images placeholder."""
    return f"{IMAGE_BASE_PATH}/{filename}"


def find_image_reference(block: str, media_hosts: list[MediaHostRule]) -> Optional[str]:
    """Return the filename or URL of the first recognised image in a block.

    Rules are tried in order; the first rule with a match decides the result.
    """
    for rule in media_hosts:
        match = rule.regex.search(block)
        if match is None:
            continue
        url = match.group(0)
        if rule.extract == EXTRACT_URL:
            return url
        return last_path_segment(url) or None
    return None


def extract_caption(block: str) -> str:
    """Plain-text caption of a caption-table block, or an empty string."""
    match = CAPTION_CELL_RE.search(block)
    if match is None:
        return ""
    return html_to_plaintext(match.group(1))


def render_image_card(reference: str, caption: str) -> str:
    """Render a Ghost image card for a filename or absolute URL."""
    src = reference if reference.startswith("http") else image_path(reference)
    return IMAGE_CARD_TEMPLATE.format(
        src=src,
        caption=html_lib.escape(caption, quote=False),
    )


def replace_caption_tables(html: str, media_hosts: list[MediaHostRule]) -> str:
    """Replace every caption-table block with a Ghost image card.

    Blocks without a recognised image URL are removed. Each pass rewrites the
    first remaining block, so output order follows the document.
    """
    while True:
        match = CAPTION_TABLE_RE.search(html)
        if match is None:
            break
        block = match.group(0)

        reference = find_image_reference(block, media_hosts)
        if reference is None:
            logger.warning("Dropping caption table without a recognised image URL")
            replacement = ""
        else:
            replacement = render_image_card(reference, extract_caption(block))

        html = html[: match.start()] + replacement + html[match.end():]
    return html
