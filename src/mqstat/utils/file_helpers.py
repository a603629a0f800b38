"""Shared file utilities for mqstat.

- get_app_dir: OS-appropriate application directory
- require_file_exists: FileNotFoundError with a helpful hint
- load_validated_json: JSON file -> validated Pydantic model
- read_message_file: raw captured message bytes
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

import click
from pydantic import BaseModel, ValidationError

from mqstat.constants import APP_NAME
from mqstat.exceptions import ConfigurationError

# Type variable for Pydantic models
T = TypeVar("T", bound=BaseModel)

__all__ = [
    "get_app_dir",
    "load_validated_json",
    "read_message_file",
    "require_file_exists",
]


def get_app_dir() -> Path:
    """Get the OS-appropriate application directory.

    Uses click.get_app_dir():
        - macOS: ~/Library/Application Support/mqstat
        - Linux: ~/.config/mqstat
        - Windows: C:\\Users\\<user>\\AppData\\Roaming\\mqstat

    Returns:
        Path to the application directory (not created).
    """
    return Path(click.get_app_dir(APP_NAME))


def require_file_exists(
    file_path: Path,
    file_type: str = "file",
    init_hint: bool = True,
) -> None:
    """Raise FileNotFoundError with helpful message if file doesn't exist.

    Args:
        file_path: Path to check.
        file_type: Description for error message (e.g., "configuration").
        init_hint: If True, suggest running 'mqstat config init'.

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    if file_path.exists():
        return

    hint = f"\nRun 'mqstat config init' to create a {file_type} file." if init_hint else ""
    raise FileNotFoundError(f"{file_type.capitalize()} file not found at {file_path}.{hint}")


def load_validated_json(
    file_path: Path,
    model_class: type[T],
    file_type: str = "file",
    recovery_hint: str | None = None,
    encoding: str | None = None,
) -> T:
    """Load JSON file and validate against Pydantic model.

    Args:
        file_path: Path to JSON file.
        model_class: Pydantic model class to validate against.
        file_type: Description for error messages (e.g., "config").
        recovery_hint: Optional hint appended to validation errors.
        encoding: File encoding. If None, uses system default.

    Returns:
        Validated Pydantic model instance.

    Raises:
        ConfigurationError: If JSON is invalid or validation fails.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read {file_type} file {file_path}: {e}") from e

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}")

        message = f"Invalid {file_type} file {file_path}:\n" + "\n".join(errors)
        if recovery_hint:
            message += f"\n{recovery_hint}"
        raise ConfigurationError(message) from e


def read_message_file(file_path: Path) -> bytes:
    """Read one captured PCF message from disk.

    Each file holds exactly one complete message as delivered by the
    queue manager (no framing).

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    require_file_exists(file_path, file_type="message", init_hint=False)
    return file_path.read_bytes()
