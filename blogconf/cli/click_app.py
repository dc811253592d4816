"""CLI entrypoint: inspect, validate and export the blog configuration."""
from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import SiteConfig, load_config, write_config
from ..errors import ConfigError
from ..giscus import render_script
from ..lib.log import configure_logging, get_logger
from ..settings import load_settings
from ..version import BLOGCONF_VERSION
from .types import AppEnv

logger = get_logger(__name__)


def _fail(command: str, message: str) -> NoReturn:
    raise SystemExit(f"{command}: {message}")


def _load(env: AppEnv, command: str, path: Optional[Path] = None) -> SiteConfig:
    try:
        return load_config(path or env.config_path)
    except ConfigError as exc:
        _fail(command, str(exc))


def _flatten(config: SiteConfig) -> List[Tuple[str, str]]:
    rows: List[Tuple[str, str]] = []
    for key, value in config.as_blog_config().items():
        if isinstance(value, dict):
            rows.extend((f"{key}.{sub}", str(item)) for sub, item in value.items())
        else:
            rows.append((key, str(value).lower() if isinstance(value, bool) else str(value)))
    return rows


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Path to a blog-config JSON file")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.version_option(BLOGCONF_VERSION, prog_name="blogconf")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool, json_logs: bool) -> None:
    """blogconf CLI."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        _fail("blogconf", str(exc))
    configure_logging(verbose=verbose or settings.verbose, json_logs=json_logs or settings.json_logs)
    ctx.obj = AppEnv(console=Console(), config_path=config_path)


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Output the camelCase JSON document")
@click.pass_obj
def show(env: AppEnv, json_output: bool) -> None:
    """Show the resolved blog configuration."""
    config = _load(env, "show")
    if json_output:
        click.echo(config.to_json())
        return
    # Values are user data; Text keeps rich from parsing "[...]" as markup.
    table = Table(title=Text(config.title), show_header=True, header_style="bold")
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in _flatten(config):
        table.add_row(Text(key), Text(value))
    env.console.print(table)


@cli.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def validate(env: AppEnv, path: Optional[Path]) -> None:
    """Validate a blog-config JSON file (or the resolved configuration)."""
    config = _load(env, "validate", path)
    logger.debug("validated blog config", title=config.title)
    click.echo("OK")


@cli.command()
@click.option("--out", type=click.Path(path_type=Path), help="Write the JSON document to path")
@click.pass_obj
def export(env: AppEnv, out: Optional[Path]) -> None:
    """Export the resolved configuration as JSON."""
    config = _load(env, "export")
    if out is None:
        click.echo(config.to_json())
        return
    target = write_config(config, out)
    env.console.print(f"Exported {target}")


@cli.command()
@click.option("--theme", default=None, help="giscus theme (e.g. light, dark, preferred_color_scheme)")
@click.pass_obj
def giscus(env: AppEnv, theme: Optional[str]) -> None:
    """Print the giscus embed script tag."""
    config = _load(env, "giscus")
    try:
        click.echo(render_script(config.giscus, theme=theme))
    except ConfigError as exc:
        _fail("giscus", str(exc))
