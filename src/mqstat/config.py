"""Application configuration for mqstat.

Defines configuration models for logging, PCF decoding, and metric export.
The config file lives at the OS-appropriate location (via click.get_app_dir)
and is optional: without one, every section uses its defaults.

Example usage:
    # Load from config file (defaults if the file is missing)
    config = AppConfig.load_or_default(get_config_path())

    # Save configuration
    config.save_to_file(get_config_path())
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_LOG_DIR",
    "AppConfig",
    "DecoderConfig",
    "ExportConfig",
    "LoggingConfig",
    "get_config_path",
    "get_system_log_path",
]

import json
import os
import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from mqstat.constants import APP_NAME, CONFIG_FILE_NAME, SYSTEM_LOG_FILE_NAME
from mqstat.utils.file_helpers import get_app_dir, load_validated_json, require_file_exists


# =============================================================================
# Platform-specific defaults
# =============================================================================


def _get_platform_log_dir() -> str:
    """Get platform-appropriate base log directory following OS conventions.

    Returns:
        Platform-specific base log directory path (unexpanded).
        mqstat logs go in <base>/mqstat/.

    Platform conventions:
        - macOS: ~/Library/Logs
        - Linux: ~/.local/state (XDG_STATE_HOME)
        - Windows: ~/AppData/Local
    """
    if sys.platform == "darwin":
        return "~/Library/Logs"
    elif sys.platform == "win32":
        return "~/AppData/Local"
    else:
        return os.environ.get("XDG_STATE_HOME", "~/.local/state")


DEFAULT_LOG_DIR = _get_platform_log_dir()


# =============================================================================
# Configuration sections
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Logs are stored in <log_dir>/mqstat/system.jsonl (WARNING and above).
    Console output on stderr always includes INFO.

    Attributes:
        log_dir: Base directory for logs.
        log_level: DEBUG adds per-message decode events to the console.
    """

    log_dir: str = Field(default=DEFAULT_LOG_DIR, min_length=1)
    log_level: Literal["DEBUG", "INFO"] = "INFO"


class DecoderConfig(BaseModel):
    """PCF decoder settings.

    Attributes:
        byte_order: Wire byte order of header and parameter integers.
            Queue managers write messages in their native encoding; x86 and
            most Linux hosts are little-endian, z/OS and AIX are big-endian.
        default_queue_manager: Used for records whose message carries no
            queue-manager name.
        message_type: Record type for messages with unrecognized commands.
    """

    byte_order: Literal["little", "big"] = "little"
    default_queue_manager: Optional[str] = Field(default=None, min_length=1)
    message_type: str = Field(default="statistics", min_length=1)


class ExportConfig(BaseModel):
    """Metric sample naming for the exporter boundary.

    Attributes:
        namespace: Prefix for metric names (e.g. "ibmmq_queue_depth_current").
    """

    namespace: str = "ibmmq"


class AppConfig(BaseModel):
    """Main application configuration for mqstat.

    Attributes:
        logging: Log directory and level.
        decoder: PCF decoding settings.
        export: Metric sample naming.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    model_config = {"extra": "ignore"}  # Ignore unknown fields for forward compat

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to JSON file.

        Creates parent directories if they don't exist.

        Args:
            config_path: Path where the config JSON file should be saved.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)
            f.write("\n")

    @classmethod
    def load_from_files(cls, config_path: Path) -> "AppConfig":
        """Load configuration from JSON file.

        Args:
            config_path: Path to the config JSON file.

        Returns:
            AppConfig instance with loaded configuration.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            ConfigurationError: If config file is invalid.
        """
        require_file_exists(config_path, file_type="configuration")
        return load_validated_json(
            config_path,
            cls,
            file_type="config",
            recovery_hint="Run 'mqstat config init --force' to reset to defaults.",
            encoding="utf-8",
        )

    @classmethod
    def load_or_default(cls, config_path: Path) -> "AppConfig":
        """Load configuration, falling back to defaults if the file is missing.

        Raises:
            ConfigurationError: If the file exists but is invalid.
        """
        if not config_path.exists():
            return cls()
        return cls.load_from_files(config_path)


# =============================================================================
# Paths
# =============================================================================


def get_config_path() -> Path:
    """Get the config file path (<app_dir>/config.json)."""
    return get_app_dir() / CONFIG_FILE_NAME


def get_system_log_path(config: AppConfig) -> Path:
    """Get the system log path (<log_dir>/mqstat/system.jsonl)."""
    return Path(config.logging.log_dir).expanduser() / APP_NAME / SYSTEM_LOG_FILE_NAME
