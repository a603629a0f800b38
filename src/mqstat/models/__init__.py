"""Pydantic models for PCF wire structures and decoded records."""

from mqstat.models.records import (
    AccountingData,
    ChannelStatistics,
    ConnectionInfo,
    MQIStatistics,
    OperationCounts,
    PCFRecord,
    QueueStatistics,
    StatisticsData,
)
from mqstat.models.wire import (
    AbsentValue,
    BytesValue,
    IntegerValue,
    PCFHeader,
    PCFParameter,
    PCFValue,
    TextValue,
)

__all__ = [
    # Wire models
    "AbsentValue",
    "BytesValue",
    "IntegerValue",
    "PCFHeader",
    "PCFParameter",
    "PCFValue",
    "TextValue",
    # Record models
    "AccountingData",
    "ChannelStatistics",
    "ConnectionInfo",
    "MQIStatistics",
    "OperationCounts",
    "PCFRecord",
    "QueueStatistics",
    "StatisticsData",
]
