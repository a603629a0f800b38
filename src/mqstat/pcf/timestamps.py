"""Command-time parsing for PCF statistics and accounting messages."""

from __future__ import annotations

__all__ = ["parse_command_time"]

from datetime import datetime, timezone

from mqstat.constants import COMMAND_TIME_FORMATS


def parse_command_time(text: str) -> datetime | None:
    """Parse an MQCACF_COMMAND_TIME value.

    Formats are tried in COMMAND_TIME_FORMATS order and the first that
    parses wins. Queue managers emit these without a zone; they are read
    as UTC.

    Args:
        text: Raw command-time text from the message.

    Returns:
        Timezone-aware datetime, or None if no format matches.
    """
    if not text:
        return None

    for fmt in COMMAND_TIME_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)

    return None
