"""Pydantic models for decoded statistics and accounting records.

A decoded message becomes exactly one of:

- StatisticsData: queue, channel, or MQI statistics (MQCMD_STATISTICS_*),
  or a generic record for command codes the decoder does not model
- AccountingData: queue or MQI accounting (MQCMD_ACCOUNTING_*)

Records are immutable and built fresh per message. ``queue_manager`` may be
None when the message does not carry MQCA_Q_MGR_NAME; callers fill in a
configured default (see mqstat.pcf.batch).
"""

from __future__ import annotations

__all__ = [
    "AccountingData",
    "ChannelStatistics",
    "ConnectionInfo",
    "MQIStatistics",
    "OperationCounts",
    "PCFRecord",
    "QueueStatistics",
    "StatisticsData",
]

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from mqstat.models.wire import PCFValue


class QueueStatistics(BaseModel):
    """Per-queue statistics (MQCMD_STATISTICS_Q).

    has_readers / has_writers are derived from the open handle counts only.
    """

    queue_name: str = ""
    current_depth: int = 0
    high_depth: int = 0
    input_count: int = 0
    output_count: int = 0
    enqueue_count: int = 0
    dequeue_count: int = 0
    has_readers: bool = False
    has_writers: bool = False

    model_config = ConfigDict(frozen=True)


class ChannelStatistics(BaseModel):
    """Per-channel statistics (MQCMD_STATISTICS_CHANNEL)."""

    channel_name: str = ""
    connection_name: str = ""
    messages: int = 0
    bytes: int = 0
    batches: int = 0

    model_config = ConfigDict(frozen=True)


class MQIStatistics(BaseModel):
    """Per-application MQI operation counters (MQCMD_STATISTICS_MQI)."""

    application_name: str = ""
    opens: int = 0
    closes: int = 0
    puts: int = 0
    gets: int = 0
    commits: int = 0
    backouts: int = 0

    model_config = ConfigDict(frozen=True)


class ConnectionInfo(BaseModel):
    """Connection identity from an accounting message.

    connect_time / disconnect_time stay None unless the message carries them.
    """

    channel_name: str = ""
    connection_name: str = ""
    application_name: str = ""
    connect_time: Optional[datetime] = None
    disconnect_time: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class OperationCounts(BaseModel):
    """MQI operation counts from an accounting message."""

    gets: int = 0
    puts: int = 0
    browses: int = 0
    opens: int = 0
    closes: int = 0
    commits: int = 0
    backouts: int = 0

    model_config = ConfigDict(frozen=True)


class StatisticsData(BaseModel):
    """
    One decoded statistics message.

    At most one of queue_stats, channel_stats, mqi_stats is set, chosen by
    the header command code. Generic records (unknown command codes) carry
    none of them, only the raw parameter map and a timestamp.
    """

    type: str = "statistics"
    queue_manager: Optional[str] = None
    timestamp: datetime
    parameters: dict[str, PCFValue] = Field(default_factory=dict)

    queue_stats: Optional[QueueStatistics] = None
    channel_stats: Optional[ChannelStatistics] = None
    mqi_stats: Optional[MQIStatistics] = None

    model_config = ConfigDict(frozen=True)


class AccountingData(BaseModel):
    """One decoded accounting message (MQCMD_ACCOUNTING_Q / _MQI)."""

    type: Literal["accounting"] = "accounting"
    queue_manager: Optional[str] = None
    timestamp: datetime
    parameters: dict[str, PCFValue] = Field(default_factory=dict)

    connection_info: Optional[ConnectionInfo] = None
    operations: Optional[OperationCounts] = None

    model_config = ConfigDict(frozen=True)


PCFRecord = Union[StatisticsData, AccountingData]
