"""Shared helpers for CLI commands: config loading and logging setup."""

from __future__ import annotations

__all__ = ["init_logging", "load_cli_config", "resolve_config_path"]

import sys
from pathlib import Path

import click

from mqstat.config import AppConfig, get_config_path, get_system_log_path
from mqstat.exceptions import ConfigurationError
from mqstat.telemetry.system import configure_system_logger_file, set_console_level

from .styling import style_error


def resolve_config_path(ctx: click.Context) -> Path:
    """Config path from the root --config option, else the app-dir default."""
    obj = ctx.find_root().obj or {}
    config_path = obj.get("config_path")
    return config_path if config_path is not None else get_config_path()


def load_cli_config(ctx: click.Context) -> AppConfig:
    """Load configuration for a command, exiting with code 1 if it is invalid.

    A missing config file is not an error; defaults apply.
    """
    config_path = resolve_config_path(ctx)
    try:
        return AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)


def init_logging(config: AppConfig) -> None:
    """Apply logging config: console level and system.jsonl file handler."""
    set_console_level(config.logging.log_level)
    configure_system_logger_file(get_system_log_path(config))
