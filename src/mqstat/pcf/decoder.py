"""PCF message decoder.

PCFDecoder ties the pieces together:

    buffer -> decode_header -> decode_parameters -> build_record

The decoder keeps no per-message state. One instance can be shared across
threads; the only shared resource is the injected logger.

Example:
    decoder = PCFDecoder(logger=get_system_logger())
    record = decoder.decode(message_bytes)
    if isinstance(record, StatisticsData) and record.queue_stats:
        print(record.queue_stats.has_readers)
"""

from __future__ import annotations

__all__ = ["PCFDecoder"]

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from mqstat.constants import PCF_HEADER_LENGTH
from mqstat.models.records import PCFRecord
from mqstat.models.wire import PCFHeader, PCFParameter
from mqstat.pcf.builder import build_record
from mqstat.pcf.header import byte_order_prefix, decode_header
from mqstat.pcf.parameters import decode_parameters

if TYPE_CHECKING:
    from mqstat.config import DecoderConfig


class PCFDecoder:
    """Decodes complete PCF statistics/accounting messages into records.

    Attributes:
        logger: Logger receiving decode events (truncation, unknown commands).
        byte_order: "little" or "big", applied to header and parameters.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        byte_order: str = "little",
    ) -> None:
        """Initialize PCFDecoder.

        Args:
            logger: Logger for decode events. Defaults to "mqstat.pcf".
            byte_order: Wire byte order, "little" or "big".

        Raises:
            ValueError: If byte_order is not supported.
        """
        byte_order_prefix(byte_order)  # validate early
        self.logger = logger or logging.getLogger("mqstat.pcf")
        self.byte_order = byte_order

    @classmethod
    def from_config(cls, config: "DecoderConfig", logger: logging.Logger | None = None) -> "PCFDecoder":
        """Create a decoder from the decoder section of AppConfig."""
        return cls(logger=logger, byte_order=config.byte_order)

    def decode_header(self, data: bytes) -> PCFHeader:
        """Decode the PCF header of a message.

        Raises:
            TruncatedHeaderError: If data is shorter than 36 bytes.
        """
        return decode_header(data, self.byte_order)

    def decode_parameters(self, data: bytes, count: int | None = None) -> list[PCFParameter]:
        """Decode a parameter stream (the bytes after the header)."""
        return decode_parameters(data, count, byte_order=self.byte_order, logger=self.logger)

    def decode(
        self,
        data: bytes,
        message_type: str = "statistics",
        now: datetime | None = None,
    ) -> PCFRecord:
        """Decode one complete message into a typed record.

        Args:
            data: Full message buffer as delivered by the queue manager.
            message_type: Record type used for unrecognized command codes.
            now: Decode-time clock override for the timestamp fallback.

        Returns:
            StatisticsData or AccountingData.

        Raises:
            TruncatedHeaderError: If data is shorter than 36 bytes. This is
                the only error raised; malformed parameters shorten the
                parameter list instead.
        """
        header = self.decode_header(data)

        self.logger.debug(
            {
                "event": "pcf_message_decoding",
                "message": "Parsing PCF message",
                "command": header.command,
                "type": header.type,
                "parameter_count": header.parameter_count,
                "message_type": message_type,
                "length": len(data),
            }
        )

        parameters = self.decode_parameters(data[PCF_HEADER_LENGTH:], header.parameter_count)
        return build_record(
            header,
            parameters,
            message_type=message_type,
            now=now,
            logger=self.logger,
        )
