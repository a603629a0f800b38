"""Main CLI entry point for mqstat.

Defines the CLI group and registers all subcommands.

Commands:
    config  - Configuration management (show, path, init)
    decode  - Decode captured PCF messages to JSON
    dump    - Hex dump and header analysis of a captured message

Subcommand help:
    mqstat COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli"]

import sys
from pathlib import Path

import click

from mqstat import __version__

from .commands.config import config
from .commands.decode import decode
from .commands.dump import dump


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="MQSTAT_CONFIG",
    default=None,
    help="Config file (default: OS app dir)",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, config_path: Path | None) -> None:
    """mqstat: IBM MQ statistics and accounting message decoder."""
    if version:
        click.echo(f"mqstat {__version__}")
        sys.exit(0)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(config)
cli.add_command(decode)
cli.add_command(dump)


def main() -> None:
    """CLI entry point."""
    cli()
