"""Batch decoding for a drained statistics or accounting queue.

A collection cycle pulls every available message and decodes them one by
one. A message that cannot be decoded is dropped, counted, and logged so
the rest of the batch still produces records.
"""

from __future__ import annotations

__all__ = ["BatchResult", "decode_batch"]

from collections.abc import Iterable
from dataclasses import dataclass, field

from mqstat.exceptions import PCFDecodeError
from mqstat.models.records import AccountingData, PCFRecord, StatisticsData
from mqstat.pcf.decoder import PCFDecoder


@dataclass(slots=True)
class BatchResult:
    """Records and counters from one decode batch."""

    records: list[PCFRecord] = field(default_factory=list)
    # Input position of each record, parallel to records
    record_indices: list[int] = field(default_factory=list)
    statistics_count: int = 0
    accounting_count: int = 0
    dropped_count: int = 0

    @property
    def total(self) -> int:
        """Number of messages seen, decoded or dropped."""
        return self.statistics_count + self.accounting_count + self.dropped_count

    def to_dict(self) -> dict[str, int]:
        """Counters as a JSON-friendly dict."""
        return {
            "total": self.total,
            "statistics": self.statistics_count,
            "accounting": self.accounting_count,
            "dropped": self.dropped_count,
        }


def decode_batch(
    decoder: PCFDecoder,
    messages: Iterable[bytes],
    *,
    message_type: str = "statistics",
    default_queue_manager: str | None = None,
) -> BatchResult:
    """Decode a batch of messages, dropping the ones that fail.

    Args:
        decoder: Decoder to use (its logger receives drop events).
        messages: Raw message buffers.
        message_type: Record type for unrecognized command codes.
        default_queue_manager: Filled into records that carry no
            MQCA_Q_MGR_NAME parameter.

    Returns:
        BatchResult with records in input order.
    """
    result = BatchResult()

    for index, data in enumerate(messages):
        try:
            record = decoder.decode(data, message_type=message_type)
        except PCFDecodeError as e:
            result.dropped_count += 1
            decoder.logger.warning(
                {
                    "event": "pcf_message_dropped",
                    "message": f"Dropping undecodable PCF message: {e}",
                    "index": index,
                    "length": len(data),
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                }
            )
            continue

        if record.queue_manager is None and default_queue_manager:
            record = record.model_copy(update={"queue_manager": default_queue_manager})

        if isinstance(record, AccountingData):
            result.accounting_count += 1
        elif isinstance(record, StatisticsData):
            result.statistics_count += 1
        result.records.append(record)
        result.record_indices.append(index)

    return result
