"""End-to-end tests for PCFDecoder on encoded messages."""

import logging
from collections.abc import Callable
from datetime import datetime

import pytest
from pydantic import ValidationError

from mqstat.config import DecoderConfig
from mqstat.constants import (
    MQCA_APPL_NAME,
    MQCA_Q_MGR_NAME,
    MQCA_Q_NAME,
    MQCACF_COMMAND_TIME,
    MQCFT_ACCOUNTING,
    MQCMD_ACCOUNTING_MQI,
    MQCMD_STATISTICS_Q,
    MQIA_CURRENT_Q_DEPTH,
    MQIA_OPEN_INPUT_COUNT,
    MQIA_OPEN_OUTPUT_COUNT,
    MQIAMO_PUTS,
)
from mqstat.exceptions import TruncatedHeaderError
from mqstat.models.records import AccountingData, StatisticsData
from mqstat.models.wire import BytesValue, IntegerValue, TextValue
from mqstat.pcf import PCFDecoder


@pytest.fixture
def queue_params() -> list:
    """Queue statistics parameters for a queue with one reader."""
    return [
        (MQCA_Q_MGR_NAME, "QM1"),
        (MQCA_Q_NAME, "ORDERS.IN"),
        (MQIA_CURRENT_Q_DEPTH, 12),
        (MQIA_OPEN_INPUT_COUNT, 1),
        (MQIA_OPEN_OUTPUT_COUNT, 0),
        (MQCACF_COMMAND_TIME, "2024-03-01 08:00:00"),
    ]


class TestPCFDecoder:
    """Tests for PCFDecoder.decode."""

    def test_decodes_queue_statistics(self, make_message: Callable[..., bytes], queue_params: list) -> None:
        # Arrange
        data = make_message(MQCMD_STATISTICS_Q, queue_params)
        decoder = PCFDecoder()

        # Act
        record = decoder.decode(data)

        # Assert
        assert isinstance(record, StatisticsData)
        assert record.queue_manager == "QM1"
        assert record.queue_stats.queue_name == "ORDERS.IN"
        assert record.queue_stats.current_depth == 12
        assert record.queue_stats.has_readers is True
        assert record.queue_stats.has_writers is False
        assert record.timestamp.year == 2024
        assert len(record.parameters) == 6

    def test_decodes_big_endian_message(self, make_message: Callable[..., bytes], queue_params: list) -> None:
        # Arrange
        data = make_message(MQCMD_STATISTICS_Q, queue_params, byte_order="big")
        decoder = PCFDecoder(byte_order="big")

        # Act
        record = decoder.decode(data)

        # Assert
        assert record.queue_stats.queue_name == "ORDERS.IN"
        assert record.queue_stats.current_depth == 12

    def test_decodes_accounting(self, make_message: Callable[..., bytes]) -> None:
        # Arrange
        data = make_message(
            MQCMD_ACCOUNTING_MQI,
            [(MQCA_APPL_NAME, "billing"), (MQIAMO_PUTS, 4)],
            msg_type=MQCFT_ACCOUNTING,
        )

        # Act
        record = PCFDecoder().decode(data)

        # Assert
        assert isinstance(record, AccountingData)
        assert record.connection_info.application_name == "billing"
        assert record.operations.puts == 4

    def test_header_only_message(self, make_message: Callable[..., bytes], now: datetime) -> None:
        """A message with no parameters still yields a record."""
        # Arrange
        data = make_message(MQCMD_STATISTICS_Q, [])

        # Act
        record = PCFDecoder().decode(data, now=now)

        # Assert
        assert record.parameters == {}
        assert record.timestamp == now
        assert record.queue_stats.current_depth == 0

    def test_unknown_command_uses_message_type(self, make_message: Callable[..., bytes], now: datetime) -> None:
        # Arrange
        data = make_message(0x42, [(MQIA_CURRENT_Q_DEPTH, 1)])

        # Act
        record = PCFDecoder().decode(data, message_type="custom", now=now)

        # Assert
        assert isinstance(record, StatisticsData)
        assert record.type == "custom"
        assert record.parameters == {"param_3": IntegerValue(value=1)}

    def test_truncated_tail_keeps_earlier_parameters(
        self, make_message: Callable[..., bytes], queue_params: list
    ) -> None:
        """Cutting a message mid-parameter loses only the cut parameter onward."""
        # Arrange
        data = make_message(MQCMD_STATISTICS_Q, queue_params)
        truncated = data[:-10]

        # Act
        record = PCFDecoder().decode(truncated)

        # Assert
        assert record.queue_manager == "QM1"
        assert record.queue_stats.queue_name == "ORDERS.IN"
        assert "param_3603" not in record.parameters

    def test_short_message_raises(self) -> None:
        with pytest.raises(TruncatedHeaderError):
            PCFDecoder().decode(b"\x00" * 20)

    def test_invalid_byte_order_rejected(self) -> None:
        with pytest.raises(ValueError):
            PCFDecoder(byte_order="native")

    def test_from_config(self) -> None:
        # Arrange
        config = DecoderConfig(byte_order="big")
        logger = logging.getLogger("mqstat.tests.decoder")

        # Act
        decoder = PCFDecoder.from_config(config, logger)

        # Assert
        assert decoder.byte_order == "big"
        assert decoder.logger is logger

    def test_logs_decode_event_at_debug(
        self, make_message: Callable[..., bytes], caplog: pytest.LogCaptureFixture
    ) -> None:
        # Arrange
        logger = logging.getLogger("mqstat.tests.decoder.debug")
        caplog.set_level(logging.DEBUG, logger=logger.name)
        data = make_message(MQCMD_STATISTICS_Q, [])

        # Act
        PCFDecoder(logger=logger).decode(data)

        # Assert
        decoding = [r.msg for r in caplog.records if isinstance(r.msg, dict)]
        assert decoding[0]["event"] == "pcf_message_decoding"
        assert decoding[0]["command"] == MQCMD_STATISTICS_Q


class TestRecordSerialization:
    """Records serialize to JSON-friendly dicts."""

    def test_model_dump_json_mode(self, make_message: Callable[..., bytes], now: datetime) -> None:
        # Arrange
        data = make_message(0x42, [(MQCA_Q_NAME, "Q1"), (9001, b"\x00\xff")])

        # Act
        record = PCFDecoder().decode(data, now=now)
        dumped = record.model_dump(mode="json")

        # Assert
        assert record.parameters["param_2016"] == TextValue(value="Q1")
        assert record.parameters["param_9001"] == BytesValue(value=b"\x00\xff\x00\x00")
        assert dumped["parameters"]["param_2016"] == {"kind": "text", "value": "Q1"}
        assert dumped["parameters"]["param_9001"]["kind"] == "bytes"
        assert dumped["timestamp"].startswith("2024-01-01T12:00:00")

    def test_records_are_frozen(self, make_message: Callable[..., bytes]) -> None:
        # Arrange
        record = PCFDecoder().decode(make_message(MQCMD_STATISTICS_Q, []))

        # Act & Assert
        with pytest.raises(ValidationError):
            record.queue_manager = "QM2"
