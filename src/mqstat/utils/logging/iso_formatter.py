"""JSONL formatting for system.jsonl.

Decoder and CLI events are logged as dicts (``{"event": ..., "message": ...,
**context}``). Each one becomes a single JSON line prefixed with a UTC
timestamp and the level name, e.g.::

    {"time": "2024-03-01T08:00:00.123Z", "level": "WARNING",
     "event": "pcf_parameter_overflow", "offset": 48, ...}
"""

from __future__ import annotations

__all__ = ["ISO8601Formatter"]

import json
import logging
from datetime import datetime, timezone
from typing import Any


def _utc_timestamp(created: float) -> str:
    """Millisecond ISO 8601 timestamp with a Z suffix."""
    stamp = datetime.fromtimestamp(created, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _event_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Fields of a structured event, or a bare message for plain log calls."""
    if isinstance(record.msg, dict):
        return record.msg
    return {"message": record.getMessage()}


class ISO8601Formatter(logging.Formatter):
    """Formats structured log events as JSON Lines with UTC timestamps.

    Values json cannot encode (bytes payloads, datetimes) are written with
    str() so a single odd field never loses the whole line.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": _utc_timestamp(record.created),
            "level": record.levelname,
            **_event_fields(record),
        }
        return json.dumps(entry, default=str)
