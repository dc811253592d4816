"""Runtime settings using Pydantic Settings for automatic env var support."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError, format_validation_error


class RuntimeSettings(BaseSettings):
    """Process-level knobs read from ``BLOGCONF_*`` environment variables.

    Supports:
    - BLOGCONF_CONFIG: path to a blog-config JSON override file
    - BLOGCONF_VERBOSE: enable debug logging
    - BLOGCONF_JSON_LOGS: emit logs as JSON lines
    """

    config: Optional[Path] = Field(default=None)
    verbose: bool = Field(default=False)
    json_logs: bool = Field(default=False)

    @field_validator("config", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        if isinstance(v, str):
            if not v.strip():
                return None
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    model_config = SettingsConfigDict(
        env_prefix="BLOGCONF_",
        extra="ignore",
    )


def load_settings() -> RuntimeSettings:
    """Read the runtime settings from the current environment.

    Raises:
        ConfigError: if a ``BLOGCONF_*`` variable holds an invalid value.
    """
    try:
        return RuntimeSettings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid BLOGCONF_* environment: {format_validation_error(exc)}") from exc
