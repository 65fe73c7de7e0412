"""Convert a Blogger export file into a Ghost import document."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from common.local_io import read_bytes_local, write_bytes_local
from common.serialization import dump_pretty_json
from convert_blogger.build_posts.build_post import build_posts
from convert_blogger.config_loader import ConvertConfig, get_config
from convert_blogger.errors import ConfigError, ReadInputError, WriteOutputError
from convert_blogger.load_entries import load_entries
from convert_blogger.models import GhostPost

logger = logging.getLogger(__name__)


def to_ghost_document(posts: list[GhostPost]) -> dict:
    """Wrap posts in the ``{"posts": [...]}`` import document."""
    return {"posts": [asdict(post) for post in posts]}


def convert_blogger(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
    config: Optional[ConvertConfig] = None,
    now: Optional[datetime] = None,
) -> list[GhostPost]:
    """Read a Blogger export, convert every entry and write the Ghost JSON.

    Output goes to ``output_path`` or stdout when it is None.

    Raises:
        ConfigError, ReadInputError, ParseInputError, NoEntriesError, WriteOutputError
    """
    if config is None:
        try:
            config = get_config()
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise ConfigError(str(exc)) from exc

    try:
        data = read_bytes_local(input_path)
    except OSError as exc:
        raise ReadInputError(str(input_path)) from exc

    entries = load_entries(data)
    posts = build_posts(entries, config, now=now)

    payload = dump_pretty_json(to_ghost_document(posts))
    try:
        write_bytes_local(payload, output_path)
    except OSError as exc:
        raise WriteOutputError(exc.strerror or str(exc)) from exc

    logger.info("%d posts written to %s", len(posts), output_path or "stdout")
    return posts
