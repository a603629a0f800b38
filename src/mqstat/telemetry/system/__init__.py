"""System logger for operational events (stderr + system.jsonl)."""

from mqstat.telemetry.system.system_logger import (
    ConsoleFormatter,
    configure_system_logger_file,
    get_system_logger,
    set_console_level,
)

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]
