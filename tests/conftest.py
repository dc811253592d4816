import json
from pathlib import Path

import pytest
import structlog

from blogconf.config import BLOG_CONFIG


@pytest.fixture(autouse=True)
def config_env(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a scratch dir and clear BLOGCONF_* overrides."""
    config_root = tmp_path / "xdg-config"
    config_root.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_root))
    for name in ("BLOGCONF_CONFIG", "BLOGCONF_VERBOSE", "BLOGCONF_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    return config_root / "blogconf"


@pytest.fixture
def blog_config() -> dict:
    """A fresh copy of the built-in camelCase declaration."""
    return json.loads(json.dumps(BLOG_CONFIG))


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name: str = "blog-config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configured by a CLI run; its stderr is gone afterwards."""
    yield
    structlog.reset_defaults()
