"""blogconf error hierarchy.

All project exceptions inherit from BlogconfError, enabling:
- ``except BlogconfError`` at the CLI boundary
- Fine-grained catches deeper in the stack (``except ConfigError``)

Hierarchy:
    BlogconfError                           # this module
    └── ConfigError                         # this module

``format_validation_error`` renders pydantic errors for ConfigError messages.
"""

from __future__ import annotations

from pydantic import ValidationError


class BlogconfError(Exception):
    """Base class for all blogconf errors."""


class ConfigError(BlogconfError):
    """Raised when a blog configuration is unreadable or fails validation."""


def format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into ``loc: msg; loc: msg``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
