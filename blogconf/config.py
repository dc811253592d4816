"""Blog configuration consumed by the site generator and the giscus widget.

``BLOG_CONFIG`` is the declaration itself, kept in the exact camelCase shape
the generator reads. ``load()`` turns it into a validated, frozen
``SiteConfig``; ``load_config()`` layers an optional JSON file over it so the
same package can serve another blog.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, get_args

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
    validate_email,
)
from pydantic.alias_generators import to_camel

from .errors import ConfigError, format_validation_error
from .lib.log import get_logger
from .paths import DEFAULT_CONFIG_NAME, config_home
from .settings import load_settings

logger = get_logger(__name__)

GiscusMapping = Literal["pathname", "url", "title", "og:title", "specific", "number"]
GiscusInputPosition = Literal["top", "bottom"]
GiscusFlag = Literal["0", "1"]

MAPPINGS = get_args(GiscusMapping)
INPUT_POSITIONS = get_args(GiscusInputPosition)
FLAGS = get_args(GiscusFlag)

EMAIL_LINK = "email"

# See https://giscus.app/
BLOG_CONFIG: Dict[str, Any] = {
    "title": "myunggon",
    "description": "책장",
    "author": "mason",
    "siteUrl": "https://mudrhs1997.github.io/gatsby-starter-hoodie/",
    "links": {
        "github": "https://github.com/devHudi",
        "medium": "https://medium.com",
        "email": "mudrhs1997@naver.com",
        "resume": "https://hudi.blog",
        "link": "https://hudi.blog",
    },
    "useAbout": True,
    "giscus": {
        "repo": "devHudi/gatsby-starter-hoodie",
        "repoId": "MDEwOlJlcG9zaXRvcnkzNjk4NjMzNTg=",
        "category": "Comments",
        "categoryId": "DIC_kwDOFguqvs4ChwGy",
        "mapping": "pathname",
        "strict": "0",
        "reactionsEnabled": "1",
        "inputPosition": "bottom",
        "lang": "en",
    },
}

_HTTP_URL = TypeAdapter(HttpUrl)


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


def _check_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"{value!r} is not a valid http(s) URL") from exc
    return value


def _check_email(value: str) -> str:
    if "<" in value:
        raise ValueError(f"{value!r} must be a bare email address")
    try:
        validate_email(value)
    except ValueError as exc:
        raise ValueError(f"{value!r} is not a valid email address") from exc
    return value


class _WireModel(BaseModel):
    """Frozen model whose wire keys are the camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GiscusConfig(_WireModel):
    """Settings handed verbatim to the giscus embed script."""

    repo: str = Field(pattern=r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")
    repo_id: str
    category: str
    category_id: str
    mapping: GiscusMapping
    strict: GiscusFlag
    reactions_enabled: GiscusFlag
    input_position: GiscusInputPosition
    lang: str

    @field_validator("repo_id", "category", "category_id", "lang")
    @classmethod
    def non_empty(cls, value: str) -> str:
        return _require_text(value)


class SiteConfig(_WireModel):
    """Site metadata read by the static-site generator."""

    title: str
    description: str
    author: str
    site_url: str
    links: Mapping[str, str]
    use_about: StrictBool
    giscus: GiscusConfig

    @field_validator("title", "description", "author")
    @classmethod
    def non_empty(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("site_url")
    @classmethod
    def url(cls, value: str) -> str:
        return _check_url(value)

    @field_validator("links")
    @classmethod
    def link_targets(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        for name, target in value.items():
            if not name.strip():
                raise ValueError("link names must be non-empty")
            if name == EMAIL_LINK:
                _check_email(target)
            else:
                _check_url(target)
        return MappingProxyType(dict(value))

    @field_serializer("links")
    def dump_links(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)

    def as_blog_config(self) -> Dict[str, Any]:
        """Return the camelCase mapping the site generator expects."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.as_blog_config(), ensure_ascii=False, indent=2)

    @classmethod
    def from_blog_config(cls, data: Mapping[str, Any]) -> "SiteConfig":
        """Validate a camelCase (or snake_case) mapping into a SiteConfig.

        Raises:
            ConfigError: if any field is missing, unknown or malformed.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"Invalid blog config: {format_validation_error(exc)}") from exc


@lru_cache(maxsize=1)
def load() -> SiteConfig:
    """Return the built-in blog configuration.

    The declaration is validated once per process and the same read-only
    record is shared by every caller.
    """
    return SiteConfig.model_validate(BLOG_CONFIG)


def _wire_key(key: str) -> str:
    # Only snake_case keys are converted; camelCase keys pass through as-is.
    return to_camel(key) if "_" in key else key


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    normalized = {_wire_key(key): value for key, value in data.items()}
    giscus = normalized.get("giscus")
    if isinstance(giscus, Mapping):
        normalized["giscus"] = {_wire_key(key): value for key, value in giscus.items()}
    return normalized


def resolve_config_path(path: Optional[Path] = None) -> tuple[Path, bool]:
    """Return the override file location and whether it was asked for explicitly."""
    if path is not None:
        return path.expanduser(), True
    env_path = load_settings().config
    if env_path is not None:
        return env_path, True
    return config_home() / DEFAULT_CONFIG_NAME, False


def read_config_file(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return data


def load_config(path: Optional[Path] = None) -> SiteConfig:
    """Load the built-in configuration with an optional JSON file layered on top.

    Top-level keys in the file replace the built-in values; ``links`` and
    ``giscus`` are replaced as a whole when present. A missing file at the
    default location yields the built-in configuration, while a missing file
    that was named explicitly (argument or ``BLOGCONF_CONFIG``) is an error.
    """
    config_path, explicit = resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("using built-in blog config", searched=str(config_path))
        return load()

    overrides = _normalize_keys(read_config_file(config_path))
    merged = {**load().as_blog_config(), **overrides}
    config = SiteConfig.from_blog_config(merged)
    logger.debug("loaded blog config", path=str(config_path), keys=sorted(overrides))
    return config


def write_config(config: SiteConfig, path: Path) -> Path:
    """Write ``config`` as a camelCase JSON document and return the path."""
    path = path.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_json() + "\n", encoding="utf-8")
    logger.info("wrote blog config", path=str(path))
    return path


__all__ = [
    "BLOG_CONFIG",
    "FLAGS",
    "INPUT_POSITIONS",
    "MAPPINGS",
    "GiscusConfig",
    "SiteConfig",
    "load",
    "load_config",
    "resolve_config_path",
    "write_config",
]
