"""blogconf - site metadata and giscus settings for a static blog.

Example:
    from blogconf import load

    config = load()
    print(config.title, config.links["github"])
    print(config.giscus.repo_id)
"""

from blogconf.config import GiscusConfig, SiteConfig, load, load_config, write_config
from blogconf.errors import BlogconfError, ConfigError

__all__ = [
    "BlogconfError",
    "ConfigError",
    "GiscusConfig",
    "SiteConfig",
    "load",
    "load_config",
    "write_config",
]
