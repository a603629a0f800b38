"""Record construction from decoded PCF parameters.

The header command code selects the record kind:

    MQCMD_STATISTICS_Q        -> StatisticsData + QueueStatistics
    MQCMD_STATISTICS_CHANNEL  -> StatisticsData + ChannelStatistics
    MQCMD_STATISTICS_MQI      -> StatisticsData + MQIStatistics
    MQCMD_ACCOUNTING_Q / _MQI -> AccountingData + ConnectionInfo + OperationCounts
    anything else             -> generic StatisticsData (raw map + timestamp)

Each sub-record is filled by one linear scan over the parameters. Tags
match by exact equality and the last occurrence wins. Integer tags only
take integer values and text tags only take text values, so a mistyped
parameter is ignored rather than coerced.
"""

from __future__ import annotations

__all__ = [
    "build_accounting",
    "build_channel_stats",
    "build_connection_info",
    "build_mqi_stats",
    "build_operation_counts",
    "build_queue_stats",
    "build_record",
    "build_statistics",
    "classify_queue_activity",
    "parameter_map",
]

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from mqstat.constants import (
    ACCOUNTING_COMMANDS,
    MQCA_APPL_NAME,
    MQCA_CHANNEL_NAME,
    MQCA_CONNECTION_NAME,
    MQCA_Q_MGR_NAME,
    MQCA_Q_NAME,
    MQCACF_COMMAND_TIME,
    MQCMD_STATISTICS_CHANNEL,
    MQCMD_STATISTICS_MQI,
    MQCMD_STATISTICS_Q,
    MQIA_CURRENT_Q_DEPTH,
    MQIA_HIGH_Q_DEPTH,
    MQIA_MSG_DEQ_COUNT,
    MQIA_MSG_ENQ_COUNT,
    MQIA_OPEN_INPUT_COUNT,
    MQIA_OPEN_OUTPUT_COUNT,
    MQIACH_BATCHES,
    MQIACH_BYTES,
    MQIACH_MSGS,
    MQIAMO_BACKOUTS,
    MQIAMO_CLOSES,
    MQIAMO_COMMITS,
    MQIAMO_GETS,
    MQIAMO_OPENS,
    MQIAMO_PUTS,
    STATISTICS_COMMANDS,
)
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
from mqstat.models.wire import IntegerValue, PCFHeader, PCFParameter, PCFValue, TextValue
from mqstat.pcf.timestamps import parse_command_time

# Integer tag -> field name, per sub-record
_QUEUE_INT_FIELDS: dict[int, str] = {
    MQIA_CURRENT_Q_DEPTH: "current_depth",
    MQIA_HIGH_Q_DEPTH: "high_depth",
    MQIA_OPEN_INPUT_COUNT: "input_count",
    MQIA_OPEN_OUTPUT_COUNT: "output_count",
    MQIA_MSG_ENQ_COUNT: "enqueue_count",
    MQIA_MSG_DEQ_COUNT: "dequeue_count",
}

_CHANNEL_INT_FIELDS: dict[int, str] = {
    MQIACH_MSGS: "messages",
    MQIACH_BYTES: "bytes",
    MQIACH_BATCHES: "batches",
}

_MQI_INT_FIELDS: dict[int, str] = {
    MQIAMO_OPENS: "opens",
    MQIAMO_CLOSES: "closes",
    MQIAMO_PUTS: "puts",
    MQIAMO_GETS: "gets",
    MQIAMO_COMMITS: "commits",
    MQIAMO_BACKOUTS: "backouts",
}

_CHANNEL_TEXT_FIELDS: dict[int, str] = {
    MQCA_CHANNEL_NAME: "channel_name",
    MQCA_CONNECTION_NAME: "connection_name",
}

_CONNECTION_TEXT_FIELDS: dict[int, str] = {
    MQCA_CHANNEL_NAME: "channel_name",
    MQCA_CONNECTION_NAME: "connection_name",
    MQCA_APPL_NAME: "application_name",
}


def classify_queue_activity(input_count: int, output_count: int) -> tuple[bool, bool]:
    """Derive reader/writer flags from open handle counts.

    Args:
        input_count: Open input handles (MQIA_OPEN_INPUT_COUNT).
        output_count: Open output handles (MQIA_OPEN_OUTPUT_COUNT).

    Returns:
        (has_readers, has_writers).
    """
    return input_count > 0, output_count > 0


def parameter_map(parameters: Sequence[PCFParameter]) -> dict[str, PCFValue]:
    """Build the raw ``param_<tag>`` -> value map. Last occurrence wins."""
    return {param.key: param.value for param in parameters}


def _scan(
    parameters: Sequence[PCFParameter],
    int_fields: dict[int, str],
    text_fields: dict[int, str],
) -> dict[str, int | str]:
    """Collect field values for the given tag tables in one pass."""
    fields: dict[str, int | str] = {}
    for param in parameters:
        value = param.value
        if isinstance(value, IntegerValue) and param.parameter in int_fields:
            fields[int_fields[param.parameter]] = value.value
        elif isinstance(value, TextValue) and param.parameter in text_fields:
            fields[text_fields[param.parameter]] = value.value
    return fields


def build_queue_stats(parameters: Sequence[PCFParameter]) -> QueueStatistics:
    """Extract queue statistics, including the reader/writer flags."""
    fields = _scan(parameters, _QUEUE_INT_FIELDS, {MQCA_Q_NAME: "queue_name"})
    has_readers, has_writers = classify_queue_activity(
        int(fields.get("input_count", 0)),
        int(fields.get("output_count", 0)),
    )
    return QueueStatistics(**fields, has_readers=has_readers, has_writers=has_writers)


def build_channel_stats(parameters: Sequence[PCFParameter]) -> ChannelStatistics:
    """Extract channel statistics."""
    return ChannelStatistics(**_scan(parameters, _CHANNEL_INT_FIELDS, _CHANNEL_TEXT_FIELDS))


def build_mqi_stats(parameters: Sequence[PCFParameter]) -> MQIStatistics:
    """Extract per-application MQI operation counters."""
    return MQIStatistics(**_scan(parameters, _MQI_INT_FIELDS, {MQCA_APPL_NAME: "application_name"}))


def build_connection_info(parameters: Sequence[PCFParameter]) -> ConnectionInfo:
    """Extract connection identity from accounting parameters."""
    return ConnectionInfo(**_scan(parameters, {}, _CONNECTION_TEXT_FIELDS))


def build_operation_counts(parameters: Sequence[PCFParameter]) -> OperationCounts:
    """Extract MQI operation counts from accounting parameters."""
    return OperationCounts(**_scan(parameters, _MQI_INT_FIELDS, {}))


def _common_fields(parameters: Sequence[PCFParameter], now: datetime) -> tuple[str | None, datetime]:
    """Return (queue_manager, timestamp) shared by both record kinds.

    The timestamp falls back to ``now`` when MQCACF_COMMAND_TIME is absent
    or matches none of the accepted formats.
    """
    queue_manager: str | None = None
    timestamp = now
    for param in parameters:
        if not isinstance(param.value, TextValue):
            continue
        if param.parameter == MQCA_Q_MGR_NAME:
            queue_manager = param.value.value
        elif param.parameter == MQCACF_COMMAND_TIME:
            parsed = parse_command_time(param.value.value)
            if parsed is not None:
                timestamp = parsed
    return queue_manager, timestamp


def build_statistics(
    header: PCFHeader,
    parameters: Sequence[PCFParameter],
    now: datetime,
) -> StatisticsData:
    """Build a StatisticsData record for an MQCMD_STATISTICS_* message."""
    queue_manager, timestamp = _common_fields(parameters, now)

    queue_stats = None
    channel_stats = None
    mqi_stats = None
    if header.command == MQCMD_STATISTICS_Q:
        queue_stats = build_queue_stats(parameters)
    elif header.command == MQCMD_STATISTICS_CHANNEL:
        channel_stats = build_channel_stats(parameters)
    elif header.command == MQCMD_STATISTICS_MQI:
        mqi_stats = build_mqi_stats(parameters)

    return StatisticsData(
        type="statistics",
        queue_manager=queue_manager,
        timestamp=timestamp,
        parameters=parameter_map(parameters),
        queue_stats=queue_stats,
        channel_stats=channel_stats,
        mqi_stats=mqi_stats,
    )


def build_accounting(
    header: PCFHeader,
    parameters: Sequence[PCFParameter],
    now: datetime,
) -> AccountingData:
    """Build an AccountingData record for an MQCMD_ACCOUNTING_* message."""
    queue_manager, timestamp = _common_fields(parameters, now)
    return AccountingData(
        queue_manager=queue_manager,
        timestamp=timestamp,
        parameters=parameter_map(parameters),
        connection_info=build_connection_info(parameters),
        operations=build_operation_counts(parameters),
    )


def build_record(
    header: PCFHeader,
    parameters: Sequence[PCFParameter],
    *,
    message_type: str = "statistics",
    now: datetime | None = None,
    logger: logging.Logger | None = None,
) -> PCFRecord:
    """Build the typed record for a decoded message.

    Never raises for unknown command codes; those produce a generic
    StatisticsData carrying only the raw parameter map.

    Args:
        header: Decoded PCF header.
        parameters: Decoded parameters, in wire order.
        message_type: Record type for unknown command codes.
        now: Decode-time clock, used when no command time parses.
            Defaults to the current UTC time.
        logger: Logger for the unknown-command event.

    Returns:
        StatisticsData or AccountingData.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    if header.command in STATISTICS_COMMANDS:
        return build_statistics(header, parameters, now)
    if header.command in ACCOUNTING_COMMANDS:
        return build_accounting(header, parameters, now)

    (logger or logging.getLogger("mqstat.pcf")).debug(
        {
            "event": "pcf_unknown_command",
            "message": "Unrecognized PCF command, building generic record",
            "command": header.command,
            "type": header.type,
            "parameter_count": len(parameters),
        }
    )
    return StatisticsData(
        type=message_type,
        timestamp=now,
        parameters=parameter_map(parameters),
    )
