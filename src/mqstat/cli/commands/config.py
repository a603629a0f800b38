"""Config command group for mqstat CLI.

Provides configuration management subcommands.
"""

from __future__ import annotations

__all__ = ["config"]

import json
import sys

import click
from pydantic import ValidationError

from mqstat.config import AppConfig, get_system_log_path

from ..helpers import load_cli_config, resolve_config_path
from ..styling import style_error, style_header, style_success


@click.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Display current configuration.

    Shows built-in defaults when no config file exists.
    """
    config_file_path = resolve_config_path(ctx)
    loaded_config = load_cli_config(ctx)

    if as_json:
        config_dict = loaded_config.model_dump(mode="json")
        config_dict["_computed"] = {
            "config_file": str(config_file_path),
            "config_file_exists": config_file_path.exists(),
            "system_log": str(get_system_log_path(loaded_config)),
        }
        click.echo(json.dumps(config_dict, indent=2))
        return

    click.echo(f"\nmqstat configuration ({config_file_path}):")
    if not config_file_path.exists():
        click.echo("  (no config file, using defaults)")
    click.echo()

    click.echo(style_header("Logging"))
    click.echo(f"  log_dir: {loaded_config.logging.log_dir}")
    click.echo(f"  log_level: {loaded_config.logging.log_level}")
    click.echo(f"  system log: {get_system_log_path(loaded_config)}")
    click.echo()

    click.echo(style_header("Decoder"))
    click.echo(f"  byte_order: {loaded_config.decoder.byte_order}")
    click.echo(f"  default_queue_manager: {loaded_config.decoder.default_queue_manager or '(none)'}")
    click.echo(f"  message_type: {loaded_config.decoder.message_type}")
    click.echo()

    click.echo(style_header("Export"))
    click.echo(f"  namespace: {loaded_config.export.namespace}")


@config.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Show config file path."""
    path = resolve_config_path(ctx)
    click.echo(str(path))
    if not path.exists():
        click.echo("(file does not exist)", err=True)


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.option("--byte-order", type=click.Choice(["little", "big"]), default="little", show_default=True)
@click.option("--queue-manager", default=None, help="Default queue manager name")
@click.pass_context
def config_init(ctx: click.Context, force: bool, byte_order: str, queue_manager: str | None) -> None:
    """Write a config file with default settings."""
    path = resolve_config_path(ctx)
    if path.exists() and not force:
        click.echo(style_error(f"Config file already exists at {path} (use --force to overwrite)"), err=True)
        sys.exit(1)

    try:
        new_config = AppConfig.model_validate(
            {"decoder": {"byte_order": byte_order, "default_queue_manager": queue_manager}}
        )
    except ValidationError as e:
        click.echo(style_error("Error: Invalid configuration:"), err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            click.echo(f"  - {loc}: {error['msg']}", err=True)
        sys.exit(1)

    try:
        new_config.save_to_file(path)
    except OSError as e:
        click.echo(style_error(f"Error: Failed to save configuration: {e}"), err=True)
        sys.exit(1)

    click.echo(style_success(f"Configuration saved to {path}"))
