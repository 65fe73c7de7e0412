"""Core entry-to-post transformation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from common.datetime import normalize_timestamp
from common.hashing import generate_post_id, generate_uuid
from common.utils import last_path_segment
from convert_blogger.build_posts.media import image_path, replace_caption_tables
from convert_blogger.build_posts.plaintext import html_to_plaintext
from convert_blogger.build_posts.sanitize import strip_footer_and_scripts
from convert_blogger.build_posts.titles import derive_slug, derive_title
from convert_blogger.config_loader import ConvertConfig
from convert_blogger.models import GhostPost, SourceEntry, Thumbnail

logger = logging.getLogger(__name__)


def feature_image_path(thumbnail: Optional[Thumbnail]) -> str:
    """Ghost feature image path for a Blogger thumbnail, or an empty string."""
    if thumbnail is None:
        return ""
    filename = last_path_segment(thumbnail.url)
    if not filename:
        return ""
    return image_path(filename)


def build_html(raw_html: str, config: ConvertConfig) -> str:
    """Sanitize Blogger HTML and rewrite its caption tables."""
    cleaned = strip_footer_and_scripts(raw_html)
    return replace_caption_tables(cleaned, config.media_hosts)


def build_post(
    entry: SourceEntry,
    config: ConvertConfig,
    new_id: Callable[[], str] = generate_post_id,
    new_uuid: Callable[[], str] = generate_uuid,
    now: Optional[datetime] = None,
) -> GhostPost:
    """Transform one Blogger entry into a draft Ghost post.

    Args:
        entry: Source entry from the feed.
        config: Conversion config (media host rules).
        new_id: Generator for the 24-char hex post ID.
        new_uuid: Generator for the post UUID.
        now: Fallback time for unparseable timestamps (default: current UTC time).

    Returns:
        GhostPost with draft status.
    """
    title = derive_title(entry)
    slug = derive_slug(entry, title)

    html = build_html(entry.content.body if entry.content else "", config)
    plaintext = html_to_plaintext(html)

    created_at = normalize_timestamp(entry.published, now)
    updated_at = normalize_timestamp(entry.updated, now)

    post_id = new_id()
    logger.debug("Built post %s (%s) from entry %s", post_id, slug, entry.id)

    return GhostPost(
        id=post_id,
        uuid=new_uuid(),
        title=title,
        slug=slug,
        html=html,
        comment_id=post_id,
        plaintext=plaintext,
        feature_image=feature_image_path(entry.thumbnail),
        created_at=created_at,
        updated_at=updated_at,
        published_at=created_at,
    )


def build_posts(
    entries: list[SourceEntry],
    config: ConvertConfig,
    new_id: Callable[[], str] = generate_post_id,
    new_uuid: Callable[[], str] = generate_uuid,
    now: Optional[datetime] = None,
) -> list[GhostPost]:
    """Transform entries in order, one post per entry."""
    if not entries:
        logger.warning("No entries to convert")
        return []

    logger.info("Converting %d entries", len(entries))
    posts = [build_post(entry, config, new_id, new_uuid, now) for entry in entries]
    logger.info("Converted %d posts", len(posts))
    return posts
