"""System logger for operational events.

This module provides the system logger handed to the PCF decoder and used
by the CLI for operational events (dropped messages, truncated parameter
streams, config problems).

Logging strategy:
- Console (stderr): INFO and above (DEBUG when configured)
- File (system.jsonl): Only issues (WARNING, ERROR, CRITICAL)

The file handler is configured separately via configure_system_logger_file()
once the log_dir from config is available.
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]

import logging
import sys
from pathlib import Path

from mqstat.constants import APP_NAME
from mqstat.utils.logging.iso_formatter import ISO8601Formatter


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts 'message' or 'event' field from dict messages for cleaner stderr output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human-readable console output.

        Args:
            record: The log record to format.

        Returns:
            str: Formatted log message with level prefix.
        """
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            return f"{record.levelname}: {msg}"
        return f"{record.levelname}: {record.getMessage()}"


# Module-level logger, created on first use
_system_logger: logging.Logger | None = None
_file_handler_configured: bool = False


def get_system_logger() -> logging.Logger:
    """Get the system logger instance.

    Creates the logger on first call with a stderr handler only.
    File handler is added later via configure_system_logger_file().

    Returns:
        logging.Logger: Configured system logger instance.

    Example:
        >>> logger = get_system_logger()
        >>> decoder = PCFDecoder(logger=logger)
    """
    global _system_logger

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(f"{APP_NAME}.system")
    _system_logger.setLevel(logging.INFO)
    _system_logger.propagate = False  # Don't propagate to root logger

    # Close and remove any existing handlers to avoid duplicates and resource leaks
    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.INFO)
    stderr_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(stderr_handler)

    return _system_logger


def set_console_level(level: str) -> None:
    """Set the system logger and its stderr handler to a level name ("DEBUG", "INFO")."""
    logger = get_system_logger()
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logger.setLevel(numeric)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric)


def configure_system_logger_file(log_path: Path) -> None:
    """Configure the system logger's file handler.

    Should be called once after config is loaded. The file handler logs
    WARNING, ERROR, CRITICAL only.

    Args:
        log_path: Path to the system log file (see get_system_log_path()).
    """
    global _file_handler_configured

    if _file_handler_configured:
        return

    logger = get_system_logger()

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # stderr still works without the file
        logger.warning(
            {
                "event": "system_log_unavailable",
                "message": f"Cannot create log directory {log_path.parent}: {e}",
                "error_type": type(e).__name__,
            }
        )
        return

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(file_handler)

    _file_handler_configured = True
