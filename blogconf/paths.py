"""Shared filesystem paths for blogconf."""

from __future__ import annotations

import os
from pathlib import Path


def _xdg_path(env_var: str, fallback: Path) -> Path:
    raw = os.environ.get(env_var)
    if raw:
        return Path(raw).expanduser()
    return fallback


def config_home() -> Path:
    """Return the blogconf config directory, honouring XDG_CONFIG_HOME at call time."""
    return _xdg_path("XDG_CONFIG_HOME", Path.home() / ".config") / "blogconf"


DEFAULT_CONFIG_NAME = "blog-config.json"


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "config_home",
]
