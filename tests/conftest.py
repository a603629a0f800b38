"""Shared fixtures for mqstat tests.

Messages are built with the package's own encoders so every test works on
real wire bytes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import pytest

from mqstat.constants import MQCFT_STATISTICS, PCF_HEADER_LENGTH
from mqstat.models.wire import PCFHeader
from mqstat.pcf import encode_header, encode_parameter

ParamPair = tuple[int, "int | str | bytes"]

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def build_message(
    command: int,
    params: Sequence[ParamPair],
    *,
    byte_order: str = "little",
    msg_type: int = MQCFT_STATISTICS,
    parameter_count: int | None = None,
) -> bytes:
    """Encode a complete PCF message from (tag, value) pairs."""
    body = b"".join(encode_parameter(tag, value, byte_order=byte_order) for tag, value in params)
    header = PCFHeader(
        type=msg_type,
        struc_length=PCF_HEADER_LENGTH,
        version=1,
        command=command,
        msg_seq_number=1,
        control=1,
        comp_code=0,
        reason=0,
        parameter_count=len(params) if parameter_count is None else parameter_count,
    )
    return encode_header(header, byte_order) + body


@pytest.fixture
def make_message() -> Callable[..., bytes]:
    """Factory fixture for encoded PCF messages."""
    return build_message


@pytest.fixture
def now() -> datetime:
    """Fixed decode-time clock."""
    return FIXED_NOW
