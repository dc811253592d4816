"""giscus embed snippet built from the ``giscus`` section of the blog config.

The widget is configured entirely through ``data-*`` attributes on its
loader script, see https://giscus.app/.
"""

from __future__ import annotations

from typing import Dict, Optional

from jinja2 import DictLoader, Environment, select_autoescape

from .config import GiscusConfig
from .errors import ConfigError

CLIENT_SCRIPT_URL = "https://giscus.app/client.js"

SCRIPT_TEMPLATE = """<script src="{{ src }}"
{%- for name, value in attributes.items() %}
        {{ name }}="{{ value }}"
{%- endfor %}
        crossorigin="anonymous"
        async>
</script>"""

# Attribute order follows the snippet generated on giscus.app.
_ATTRIBUTES = (
    ("data-repo", "repo"),
    ("data-repo-id", "repo_id"),
    ("data-category", "category"),
    ("data-category-id", "category_id"),
    ("data-mapping", "mapping"),
    ("data-strict", "strict"),
    ("data-reactions-enabled", "reactions_enabled"),
    ("data-input-position", "input_position"),
    ("data-lang", "lang"),
)

_env = Environment(
    loader=DictLoader({"giscus.html": SCRIPT_TEMPLATE}),
    autoescape=select_autoescape(["html", "xml"]),
)


def data_attributes(giscus: GiscusConfig, *, theme: Optional[str] = None) -> Dict[str, str]:
    """Map the giscus settings onto the loader script's ``data-*`` attributes.

    Values are passed through untouched so flags stay ``"0"``/``"1"``.
    """
    attributes = {name: getattr(giscus, field) for name, field in _ATTRIBUTES}
    if theme is not None:
        if not theme.strip():
            raise ConfigError("giscus theme must be a non-empty string")
        attributes["data-theme"] = theme
    return attributes


def render_script(giscus: GiscusConfig, *, theme: Optional[str] = None) -> str:
    """Render the ``<script>`` tag that mounts the comments widget."""
    template = _env.get_template("giscus.html")
    return template.render(src=CLIENT_SCRIPT_URL, attributes=data_attributes(giscus, theme=theme))


__all__ = ["CLIENT_SCRIPT_URL", "data_attributes", "render_script"]
