"""Custom exceptions for mqstat.

Exceptions are organized into two categories:

Fatal-to-message (message is dropped, counted, and logged):
    - PCFDecodeError: Base for buffers that cannot be decoded at all
    - TruncatedHeaderError: Buffer too short to hold a PCF header

Setup errors (CLI exits non-zero):
    - ConfigurationError: Config file is unreadable or invalid

Anomalies inside a message (bad parameter lengths, unknown commands,
unparseable timestamps) are not exceptions. The decoder absorbs them and
logs a structured event instead.

Usage:
    from mqstat.exceptions import PCFDecodeError, TruncatedHeaderError
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "PCFDecodeError",
    "TruncatedHeaderError",
]

from mqstat.constants import PCF_HEADER_LENGTH


class PCFDecodeError(ValueError):
    """A message buffer could not be decoded.

    Raised only for conditions that make the whole message unusable.
    Callers processing a stream of messages catch this, drop the message,
    and continue with the next one.
    """


class TruncatedHeaderError(PCFDecodeError):
    """Buffer is shorter than the fixed PCF header.

    Attributes:
        length: Actual buffer length in bytes.
        required: Minimum length needed for a header.
    """

    def __init__(self, length: int, required: int = PCF_HEADER_LENGTH) -> None:
        """Initialize TruncatedHeaderError.

        Args:
            length: Actual buffer length in bytes.
            required: Minimum length needed for a header.
        """
        self.length = length
        self.required = required
        super().__init__(
            f"Message too short to be a valid PCF message: {length} bytes, need at least {required}"
        )


class ConfigurationError(ValueError):
    """Configuration file could not be loaded or failed validation."""
