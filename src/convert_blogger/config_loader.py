"""YAML configuration loader for the Blogger conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from common.config import ConfigSingleton, find_config_path, load_yaml

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "BLOGGER2GHOST_CONFIG"

EXTRACT_FILENAME = "filename"
EXTRACT_URL = "url"
EXTRACT_RULES = (EXTRACT_FILENAME, EXTRACT_URL)


@dataclass
class MediaHostRule:
    """An image host recognised inside caption-table blocks."""

    pattern: str
    extract: str = EXTRACT_FILENAME
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.extract not in EXTRACT_RULES:
            raise ValueError(
                f"Invalid extract rule: {self.extract}. Must be one of {list(EXTRACT_RULES)}"
            )
        try:
            self.regex = re.compile(self.pattern)
        except re.error as exc:
            raise ValueError(f"Invalid media host pattern {self.pattern!r}: {exc}") from exc


def _default_media_hosts() -> list[MediaHostRule]:
    return [
        MediaHostRule(r"""https://blogger\.googleusercontent\.com/[^\s"']+""", EXTRACT_FILENAME),
        MediaHostRule(r"""http://curtisjones\.us/[^\s"']+""", EXTRACT_URL),
        MediaHostRule(r"""https://curtisjones\.us/[^\s"']+""", EXTRACT_URL),
    ]


@dataclass
class ConvertConfig:
    media_hosts: list[MediaHostRule] = field(default_factory=_default_media_hosts)

    def __post_init__(self) -> None:
        if not self.media_hosts:
            raise ValueError("At least one media host rule is required")


def _parse_media_hosts(data: dict) -> list[MediaHostRule]:
    """Parse the ordered media host rules from YAML data."""
    hosts_data = data.get("media_hosts")
    if hosts_data is None:
        return _default_media_hosts()
    if not isinstance(hosts_data, list):
        raise ValueError("media_hosts must be a list")

    rules = []
    for item in hosts_data:
        if not isinstance(item, dict) or not item.get("pattern"):
            raise ValueError(f"Invalid media host entry: {item!r}")
        rules.append(
            MediaHostRule(
                pattern=item["pattern"],
                extract=item.get("extract", EXTRACT_FILENAME),
            )
        )
    return rules


def load_config(config_name: str | None = None) -> ConvertConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                     Defaults to BLOGGER2GHOST_CONFIG env var or "default".

    Returns:
        ConvertConfig instance.
    """
    load_dotenv()

    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    data = load_yaml(config_path)

    return ConvertConfig(media_hosts=_parse_media_hosts(data))


_manager = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
