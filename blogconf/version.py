"""Installed blogconf version, reported by ``blogconf --version``."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    BLOGCONF_VERSION = version("blogconf")
except PackageNotFoundError:
    BLOGCONF_VERSION = "0+unknown"

__all__ = ["BLOGCONF_VERSION"]
