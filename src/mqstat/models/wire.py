"""Pydantic models for the PCF wire structures.

A PCF message is a fixed header (MQCFH) followed by a stream of
self-describing parameters. Each parameter carries a decoded value, which
is one of four variants discriminated by ``kind``:

    integer  - one signed 32-bit integer (MQCFT_INTEGER)
    text     - NUL-truncated string (MQCFT_STRING)
    bytes    - opaque byte string (MQCFT_BYTE_STRING)
    absent   - any other type, or a payload too short to decode

Parameters with an absent value are still kept so the raw parameter map
records every tag seen on the wire.
"""

from __future__ import annotations

__all__ = [
    "AbsentValue",
    "BytesValue",
    "IntegerValue",
    "PCFHeader",
    "PCFParameter",
    "PCFValue",
    "TextValue",
]

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class IntegerValue(BaseModel):
    """Signed 32-bit integer parameter value."""

    kind: Literal["integer"] = "integer"
    value: int

    model_config = ConfigDict(frozen=True)


class TextValue(BaseModel):
    """Text parameter value, truncated at the first NUL byte."""

    kind: Literal["text"] = "text"
    value: str

    model_config = ConfigDict(frozen=True)


class BytesValue(BaseModel):
    """Opaque byte-string parameter value.

    Serialized as base64 in JSON output since the payload is arbitrary binary.
    """

    kind: Literal["bytes"] = "bytes"
    value: bytes

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64", val_json_bytes="base64")


class AbsentValue(BaseModel):
    """Placeholder for parameters whose type is not decoded."""

    kind: Literal["absent"] = "absent"

    model_config = ConfigDict(frozen=True)


PCFValue = Annotated[
    Union[IntegerValue, TextValue, BytesValue, AbsentValue],
    Field(discriminator="kind"),
]


class PCFHeader(BaseModel):
    """PCF message header (MQCFH).

    All fields are signed 32-bit integers at fixed 4-byte offsets, in the
    order declared here.

    Attributes:
        type: Structure type (MQCFT_STATISTICS, MQCFT_ACCOUNTING, ...).
        struc_length: Declared header length (36 for MQCFH).
        version: Structure version.
        command: Command code; selects the record variant.
        msg_seq_number: Message sequence number within a group.
        control: Control options (last message in group, ...).
        comp_code: Completion code.
        reason: Reason code qualifying comp_code.
        parameter_count: Declared number of parameters. Advisory only.
    """

    type: int
    struc_length: int
    version: int
    command: int
    msg_seq_number: int
    control: int
    comp_code: int
    reason: int
    parameter_count: int

    model_config = ConfigDict(frozen=True)


class PCFParameter(BaseModel):
    """One parameter from the PCF parameter stream.

    Attributes:
        parameter: Numeric tag identifying the meaning (e.g. MQCA_Q_NAME).
        type: Wire type tag (MQCFT_INTEGER, MQCFT_STRING, ...).
        length: Declared length in bytes, including the 12-byte sub-header.
        value: Decoded value variant.
    """

    parameter: int
    type: int
    length: int
    value: PCFValue = Field(default_factory=AbsentValue)

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        """Raw parameter map key for this parameter (``param_<tag>``)."""
        return f"param_{self.parameter}"
