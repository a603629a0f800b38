"""PCF parameter stream decoding.

Parameters follow the header back to back. Each one starts with a 12-byte
sub-header (tag, type, declared length) and occupies its declared length
rounded up to a 4-byte boundary.

Decoding is best-effort. A declared length outside [12, 65536] or one that
runs past the buffer ends the stream: parameters decoded so far are
returned and a WARNING event is logged. Queue managers truncate oversized
messages, and losing the tail of one message must not lose what was
already decoded.
"""

from __future__ import annotations

__all__ = [
    "decode_parameters",
    "encode_parameter",
    "resolve_value",
]

import logging
import struct

from mqstat.constants import (
    MQCFT_BYTE_STRING,
    MQCFT_INTEGER,
    MQCFT_STRING,
    PCF_ALIGNMENT,
    PCF_MAX_PARAMETER_LENGTH,
    PCF_PARAMETER_HEADER_LENGTH,
)
from mqstat.models.wire import (
    AbsentValue,
    BytesValue,
    IntegerValue,
    PCFParameter,
    PCFValue,
    TextValue,
)
from mqstat.pcf.header import byte_order_prefix

_INTEGER_LENGTH = 4


def _align(offset: int) -> int:
    """Round offset up to the next multiple of PCF_ALIGNMENT."""
    remainder = offset % PCF_ALIGNMENT
    if remainder:
        offset += PCF_ALIGNMENT - remainder
    return offset


def _clean_text(raw: bytes) -> str:
    """Decode text, keeping only the bytes before the first NUL.

    Surrounding spaces are preserved; MQ pads fixed-width names with
    blanks and callers decide whether to strip them.
    """
    nul = raw.find(b"\x00")
    if nul >= 0:
        raw = raw[:nul]
    return raw.decode("utf-8", errors="replace")


def resolve_value(param_type: int, length: int, payload: bytes, byte_order: str = "little") -> PCFValue:
    """Decode a parameter payload according to its type tag.

    Args:
        param_type: Wire type tag (MQCFT_*).
        length: Declared parameter length, including the 12-byte sub-header.
        payload: Bytes following the sub-header, ``length - 12`` long.
        byte_order: "little" or "big".

    Returns:
        IntegerValue, TextValue, or BytesValue for the modelled types.
        AbsentValue for any other type tag, or when the payload is too
        short for its type.
    """
    payload_length = length - PCF_PARAMETER_HEADER_LENGTH

    if param_type == MQCFT_INTEGER:
        if payload_length < _INTEGER_LENGTH:
            return AbsentValue()
        (value,) = struct.unpack_from(f"{byte_order_prefix(byte_order)}i", payload, 0)
        return IntegerValue(value=value)

    if param_type == MQCFT_STRING:
        if payload_length <= 0:
            return AbsentValue()
        return TextValue(value=_clean_text(payload[:payload_length]))

    if param_type == MQCFT_BYTE_STRING:
        if payload_length <= 0:
            return AbsentValue()
        return BytesValue(value=bytes(payload[:payload_length]))

    return AbsentValue()


def decode_parameters(
    data: bytes,
    count: int | None = None,
    *,
    byte_order: str = "little",
    logger: logging.Logger | None = None,
) -> list[PCFParameter]:
    """Decode the parameter stream that follows the PCF header.

    Args:
        data: Buffer starting at the first parameter.
        count: Parameter count declared in the header. Advisory only; the
            byte stream's own boundaries decide where decoding stops.
        byte_order: "little" or "big".
        logger: Logger for truncation events. Defaults to "mqstat.pcf".

    Returns:
        Parameters in wire order. May be shorter than ``count``.
    """
    log = logger or logging.getLogger("mqstat.pcf")
    prefix = byte_order_prefix(byte_order)
    sub_header = struct.Struct(f"{prefix}3i")

    parameters: list[PCFParameter] = []
    offset = 0
    data_length = len(data)

    while offset < data_length:
        if offset + PCF_PARAMETER_HEADER_LENGTH > data_length:
            log.debug(
                {
                    "event": "pcf_parameter_header_incomplete",
                    "message": "Not enough bytes for a PCF parameter header",
                    "remaining_bytes": data_length - offset,
                }
            )
            break

        tag, param_type, length = sub_header.unpack_from(data, offset)

        if length < PCF_PARAMETER_HEADER_LENGTH or length > PCF_MAX_PARAMETER_LENGTH:
            log.warning(
                {
                    "event": "pcf_parameter_length_invalid",
                    "message": "Invalid parameter length, discarding rest of message",
                    "parameter": tag,
                    "type": param_type,
                    "length": length,
                    "offset": offset,
                    "decoded_parameters": len(parameters),
                }
            )
            break

        end = offset + length
        if end > data_length:
            log.warning(
                {
                    "event": "pcf_parameter_overflow",
                    "message": "Parameter extends beyond data length, discarding rest of message",
                    "parameter": tag,
                    "length": length,
                    "offset": offset,
                    "data_length": data_length,
                    "required_end": end,
                    "decoded_parameters": len(parameters),
                }
            )
            break

        value = resolve_value(
            param_type,
            length,
            data[offset + PCF_PARAMETER_HEADER_LENGTH : end],
            byte_order,
        )
        parameters.append(PCFParameter(parameter=tag, type=param_type, length=length, value=value))

        offset = _align(end)

    if count is not None and count != len(parameters):
        log.debug(
            {
                "event": "pcf_parameter_count_mismatch",
                "message": "Decoded parameter count differs from header",
                "declared": count,
                "decoded": len(parameters),
            }
        )

    return parameters


def encode_parameter(
    parameter: int,
    value: int | str | bytes,
    *,
    byte_order: str = "little",
    param_type: int | None = None,
) -> bytes:
    """Encode one parameter in wire form, padded to a 4-byte boundary.

    The declared length is the padded length, as queue managers emit it.
    Text is NUL-padded.

    Args:
        parameter: Numeric tag.
        value: int for MQCFT_INTEGER, str for MQCFT_STRING, bytes for
            MQCFT_BYTE_STRING.
        byte_order: "little" or "big".
        param_type: Override the type tag inferred from ``value``.

    Returns:
        Encoded parameter bytes.
    """
    prefix = byte_order_prefix(byte_order)

    if isinstance(value, bool):
        raise TypeError("bool is not a PCF parameter value")
    if isinstance(value, int):
        inferred = MQCFT_INTEGER
        payload = struct.pack(f"{prefix}i", value)
    elif isinstance(value, str):
        inferred = MQCFT_STRING
        payload = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        inferred = MQCFT_BYTE_STRING
        payload = bytes(value)
    else:
        raise TypeError(f"Unsupported PCF parameter value type: {type(value).__name__}")

    length = _align(PCF_PARAMETER_HEADER_LENGTH + len(payload))
    payload = payload.ljust(length - PCF_PARAMETER_HEADER_LENGTH, b"\x00")
    tag_type = inferred if param_type is None else param_type
    return struct.pack(f"{prefix}3i", parameter, tag_type, length) + payload
