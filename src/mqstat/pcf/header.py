"""PCF header (MQCFH) decoding.

The header is nine signed 32-bit integers at fixed offsets. One byte order
is applied to the whole message; the parameter stream reuses it.
"""

from __future__ import annotations

__all__ = [
    "byte_order_prefix",
    "decode_header",
    "encode_header",
]

import struct

from mqstat.constants import BYTE_ORDER_FORMATS, PCF_HEADER_LENGTH
from mqstat.exceptions import TruncatedHeaderError
from mqstat.models.wire import PCFHeader

_HEADER_FIELDS: tuple[str, ...] = (
    "type",
    "struc_length",
    "version",
    "command",
    "msg_seq_number",
    "control",
    "comp_code",
    "reason",
    "parameter_count",
)


def byte_order_prefix(byte_order: str) -> str:
    """Return the struct prefix for a byte order name.

    Args:
        byte_order: "little" or "big".

    Returns:
        "<" or ">".

    Raises:
        ValueError: If byte_order is not a supported name.
    """
    try:
        return BYTE_ORDER_FORMATS[byte_order]
    except KeyError:
        supported = ", ".join(sorted(BYTE_ORDER_FORMATS))
        raise ValueError(f"Unsupported byte order {byte_order!r} (expected one of: {supported})") from None


def decode_header(data: bytes, byte_order: str = "little") -> PCFHeader:
    """Decode the fixed 36-byte PCF header at the start of a buffer.

    Only the length is validated. Unknown command codes are valid here and
    handled by the record builder.

    Args:
        data: Message buffer (header plus parameters).
        byte_order: "little" or "big".

    Returns:
        Decoded PCFHeader.

    Raises:
        TruncatedHeaderError: If data is shorter than 36 bytes.
    """
    if len(data) < PCF_HEADER_LENGTH:
        raise TruncatedHeaderError(len(data))

    values = struct.unpack_from(f"{byte_order_prefix(byte_order)}9i", data, 0)
    return PCFHeader(**dict(zip(_HEADER_FIELDS, values)))


def encode_header(header: PCFHeader, byte_order: str = "little") -> bytes:
    """Encode a PCFHeader back into its 36-byte wire form."""
    values = [getattr(header, name) for name in _HEADER_FIELDS]
    return struct.pack(f"{byte_order_prefix(byte_order)}9i", *values)
