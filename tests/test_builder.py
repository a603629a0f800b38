"""Tests for record construction from decoded parameters."""

from datetime import datetime, timezone

import pytest

from mqstat.constants import (
    MQCA_APPL_NAME,
    MQCA_CHANNEL_NAME,
    MQCA_CONNECTION_NAME,
    MQCA_Q_MGR_NAME,
    MQCA_Q_NAME,
    MQCACF_COMMAND_TIME,
    MQCFT_INTEGER,
    MQCFT_STRING,
    MQCMD_ACCOUNTING_MQI,
    MQCMD_ACCOUNTING_Q,
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
)
from mqstat.models.records import AccountingData, StatisticsData
from mqstat.models.wire import AbsentValue, IntegerValue, PCFHeader, PCFParameter, TextValue
from mqstat.pcf import build_record, classify_queue_activity

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def header(command: int) -> PCFHeader:
    return PCFHeader(
        type=0x14,
        struc_length=36,
        version=1,
        command=command,
        msg_seq_number=1,
        control=1,
        comp_code=0,
        reason=0,
        parameter_count=0,
    )


def int_param(tag: int, value: int) -> PCFParameter:
    return PCFParameter(parameter=tag, type=MQCFT_INTEGER, length=16, value=IntegerValue(value=value))


def text_param(tag: int, value: str) -> PCFParameter:
    return PCFParameter(parameter=tag, type=MQCFT_STRING, length=48, value=TextValue(value=value))


# ============================================================================
# Queue statistics
# ============================================================================


class TestQueueStatistics:
    """MQCMD_STATISTICS_Q records."""

    def test_full_queue_record(self) -> None:
        """Given a busy queue, fields and reader/writer flags are set."""
        # Arrange
        params = [
            text_param(MQCA_Q_MGR_NAME, "QM1"),
            text_param(MQCA_Q_NAME, "TEST.QUEUE"),
            int_param(MQIA_CURRENT_Q_DEPTH, 100),
            int_param(MQIA_HIGH_Q_DEPTH, 250),
            int_param(MQIA_OPEN_INPUT_COUNT, 2),
            int_param(MQIA_OPEN_OUTPUT_COUNT, 1),
            int_param(MQIA_MSG_ENQ_COUNT, 1000),
            int_param(MQIA_MSG_DEQ_COUNT, 900),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert isinstance(record, StatisticsData)
        assert record.type == "statistics"
        assert record.queue_manager == "QM1"
        stats = record.queue_stats
        assert stats is not None
        assert stats.queue_name == "TEST.QUEUE"
        assert stats.current_depth == 100
        assert stats.high_depth == 250
        assert stats.input_count == 2
        assert stats.output_count == 1
        assert stats.enqueue_count == 1000
        assert stats.dequeue_count == 900
        assert stats.has_readers is True
        assert stats.has_writers is True
        assert record.channel_stats is None
        assert record.mqi_stats is None

    def test_idle_queue_has_no_readers_or_writers(self) -> None:
        # Arrange
        params = [
            text_param(MQCA_Q_NAME, "IDLE.QUEUE"),
            int_param(MQIA_OPEN_INPUT_COUNT, 0),
            int_param(MQIA_OPEN_OUTPUT_COUNT, 0),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert record.queue_stats.has_readers is False
        assert record.queue_stats.has_writers is False

    def test_missing_fields_default_to_zero(self) -> None:
        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), [], now=NOW)

        # Assert
        assert record.queue_stats.queue_name == ""
        assert record.queue_stats.current_depth == 0
        assert record.queue_stats.has_readers is False
        assert record.queue_manager is None

    def test_last_occurrence_wins(self) -> None:
        # Arrange
        params = [
            int_param(MQIA_CURRENT_Q_DEPTH, 1),
            int_param(MQIA_CURRENT_Q_DEPTH, 2),
            text_param(MQCA_Q_MGR_NAME, "QM.OLD"),
            text_param(MQCA_Q_MGR_NAME, "QM.NEW"),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert record.queue_stats.current_depth == 2
        assert record.queue_manager == "QM.NEW"
        assert record.parameters["param_3"] == IntegerValue(value=2)

    def test_mistyped_parameter_is_ignored(self) -> None:
        """A text value under an integer tag does not fill the integer field."""
        # Arrange
        params = [
            PCFParameter(parameter=MQIA_OPEN_INPUT_COUNT, type=MQCFT_STRING, length=16, value=TextValue(value="5")),
            PCFParameter(parameter=MQIA_OPEN_OUTPUT_COUNT, type=99, length=16, value=AbsentValue()),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert record.queue_stats.input_count == 0
        assert record.queue_stats.has_readers is False
        assert isinstance(record.parameters["param_66"], AbsentValue)


class TestClassifyQueueActivity:
    """Reader/writer flags come from open handle counts."""

    @pytest.mark.parametrize(
        ("input_count", "output_count", "expected"),
        [
            (0, 0, (False, False)),
            (1, 0, (True, False)),
            (0, 3, (False, True)),
            (2, 1, (True, True)),
        ],
    )
    def test_flags(self, input_count: int, output_count: int, expected: tuple[bool, bool]) -> None:
        assert classify_queue_activity(input_count, output_count) == expected


# ============================================================================
# Channel and MQI statistics
# ============================================================================


class TestChannelStatistics:
    """MQCMD_STATISTICS_CHANNEL records."""

    def test_channel_record(self) -> None:
        # Arrange
        params = [
            text_param(MQCA_CHANNEL_NAME, "TO.QM2"),
            text_param(MQCA_CONNECTION_NAME, "10.0.0.5(1414)"),
            int_param(MQIACH_MSGS, 500),
            int_param(MQIACH_BYTES, 123456),
            int_param(MQIACH_BATCHES, 20),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_CHANNEL), params, now=NOW)

        # Assert
        stats = record.channel_stats
        assert stats.channel_name == "TO.QM2"
        assert stats.connection_name == "10.0.0.5(1414)"
        assert stats.messages == 500
        assert stats.bytes == 123456
        assert stats.batches == 20
        assert record.queue_stats is None


class TestMQIStatistics:
    """MQCMD_STATISTICS_MQI records."""

    def test_mqi_record(self) -> None:
        # Arrange
        params = [
            text_param(MQCA_APPL_NAME, "TestApp"),
            int_param(MQIAMO_OPENS, 10),
            int_param(MQIAMO_CLOSES, 8),
            int_param(MQIAMO_PUTS, 500),
            int_param(MQIAMO_GETS, 450),
            int_param(MQIAMO_COMMITS, 50),
            int_param(MQIAMO_BACKOUTS, 5),
        ]

        # Act
        record = build_record(header(MQCMD_STATISTICS_MQI), params, now=NOW)

        # Assert
        stats = record.mqi_stats
        assert stats.application_name == "TestApp"
        assert (stats.opens, stats.closes, stats.puts, stats.gets) == (10, 8, 500, 450)
        assert (stats.commits, stats.backouts) == (50, 5)


# ============================================================================
# Accounting
# ============================================================================


class TestAccounting:
    """MQCMD_ACCOUNTING_* records."""

    @pytest.mark.parametrize("command", [MQCMD_ACCOUNTING_MQI, MQCMD_ACCOUNTING_Q])
    def test_accounting_record(self, command: int) -> None:
        # Arrange
        params = [
            text_param(MQCA_Q_MGR_NAME, "QM1"),
            text_param(MQCA_APPL_NAME, "payments"),
            text_param(MQCA_CHANNEL_NAME, "APP.SVRCONN"),
            text_param(MQCA_CONNECTION_NAME, "192.168.1.20"),
            int_param(MQIAMO_PUTS, 7),
            int_param(MQIAMO_GETS, 3),
            int_param(MQIAMO_COMMITS, 2),
        ]

        # Act
        record = build_record(header(command), params, now=NOW)

        # Assert
        assert isinstance(record, AccountingData)
        assert record.type == "accounting"
        assert record.queue_manager == "QM1"
        assert record.connection_info.application_name == "payments"
        assert record.connection_info.channel_name == "APP.SVRCONN"
        assert record.connection_info.connection_name == "192.168.1.20"
        assert record.connection_info.connect_time is None
        assert record.operations.puts == 7
        assert record.operations.gets == 3
        assert record.operations.commits == 2
        assert record.operations.browses == 0


# ============================================================================
# Timestamp and generic records
# ============================================================================


class TestTimestamp:
    """Command time sets the record timestamp when it parses."""

    def test_command_time_parsed(self) -> None:
        # Arrange
        params = [text_param(MQCACF_COMMAND_TIME, "2023-11-08 15:30:45.123")]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert record.timestamp == datetime(2023, 11, 8, 15, 30, 45, 123000, tzinfo=timezone.utc)

    def test_unparseable_command_time_falls_back_to_now(self) -> None:
        # Arrange
        params = [text_param(MQCACF_COMMAND_TIME, "invalid")]

        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), params, now=NOW)

        # Assert
        assert record.timestamp == NOW

    def test_bad_later_command_time_keeps_earlier_parse(self) -> None:
        # Arrange
        params = [
            text_param(MQCACF_COMMAND_TIME, "20231108153045"),
            text_param(MQCACF_COMMAND_TIME, "garbage"),
        ]

        # Act
        record = build_record(header(MQCMD_ACCOUNTING_MQI), params, now=NOW)

        # Assert
        assert record.timestamp == datetime(2023, 11, 8, 15, 30, 45, tzinfo=timezone.utc)

    def test_default_now_is_utc(self) -> None:
        # Act
        record = build_record(header(MQCMD_STATISTICS_Q), [])

        # Assert
        assert record.timestamp.tzinfo is not None


class TestGenericRecord:
    """Unknown command codes produce a generic statistics record."""

    def test_unknown_command(self) -> None:
        # Arrange
        params = [text_param(MQCA_Q_MGR_NAME, "QM1"), int_param(MQIA_CURRENT_Q_DEPTH, 4)]

        # Act
        record = build_record(header(0x99), params, now=NOW)

        # Assert
        assert isinstance(record, StatisticsData)
        assert record.type == "statistics"
        assert record.timestamp == NOW
        assert record.queue_manager is None
        assert record.queue_stats is None
        assert record.channel_stats is None
        assert record.mqi_stats is None
        assert record.parameters == {
            "param_2002": TextValue(value="QM1"),
            "param_3": IntegerValue(value=4),
        }

    def test_unknown_command_uses_caller_message_type(self) -> None:
        # Act
        record = build_record(header(0x99), [], message_type="accounting", now=NOW)

        # Assert
        assert isinstance(record, StatisticsData)
        assert record.type == "accounting"
