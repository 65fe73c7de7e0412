"""Shared configuration utilities."""

import os
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml

T = TypeVar("T")


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "default",
    env_var: str | None = None,
) -> Path:
    """Resolve ``<config_dir>/<name>.yaml``.

    The name comes from ``config_name``, else from ``env_var`` when that is
    set in the environment, else ``default_name``.

    Raises:
        FileNotFoundError: If the resolved file doesn't exist
    """
    name = config_name
    if name is None and env_var:
        name = os.environ.get(env_var)
    config_path = config_dir / f"{name or default_name}.yaml"
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path


def load_yaml(path: Path) -> dict:
    """Load a YAML mapping (an empty file gives an empty dict)."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


class ConfigSingleton(Generic[T]):
    """Holds one lazily loaded config instance.

    Tests swap the instance with ``set`` and drop it with ``reset``.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        self._config = config

    def reset(self) -> None:
        self._config = None
