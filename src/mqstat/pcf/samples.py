"""Metric samples derived from decoded records.

This is the boundary with the metrics exporter: each numeric field of a
record becomes one labelled sample. Registration and serving belong to the
exporter; this module only decides names, labels, and values.

Label sets:
    queue statistics    {queue_manager, queue_name}
    channel statistics  {queue_manager, channel_name, connection_name}
    MQI statistics      {queue_manager, application_name}
    accounting          {queue_manager, application_name}

Statistics samples are gauges (set to the latest value). Accounting samples
are counters: each accounting record is a delta to add.
"""

from __future__ import annotations

__all__ = ["MetricSample", "record_samples"]

from typing import Literal, NamedTuple

from mqstat.models.records import AccountingData, PCFRecord, StatisticsData

DEFAULT_NAMESPACE = "ibmmq"

# (metric suffix, field name)
_QUEUE_METRICS: tuple[tuple[str, str], ...] = (
    ("queue_depth_current", "current_depth"),
    ("queue_depth_high", "high_depth"),
    ("queue_enqueue_count", "enqueue_count"),
    ("queue_dequeue_count", "dequeue_count"),
    ("queue_input_handles", "input_count"),
    ("queue_output_handles", "output_count"),
    ("queue_has_readers", "has_readers"),
    ("queue_has_writers", "has_writers"),
)

_CHANNEL_METRICS: tuple[tuple[str, str], ...] = (
    ("channel_messages_total", "messages"),
    ("channel_bytes_total", "bytes"),
    ("channel_batches_total", "batches"),
)

_MQI_METRICS: tuple[tuple[str, str], ...] = (
    ("mqi_opens_total", "opens"),
    ("mqi_closes_total", "closes"),
    ("mqi_puts_total", "puts"),
    ("mqi_gets_total", "gets"),
    ("mqi_commits_total", "commits"),
    ("mqi_backouts_total", "backouts"),
)


class MetricSample(NamedTuple):
    """One labelled metric value."""

    name: str
    labels: dict[str, str]
    value: float
    kind: Literal["gauge", "counter"] = "gauge"


def _metric_name(namespace: str, suffix: str) -> str:
    return f"{namespace}_{suffix}" if namespace else suffix


def record_samples(
    record: PCFRecord,
    default_queue_manager: str = "",
    namespace: str = DEFAULT_NAMESPACE,
) -> list[MetricSample]:
    """Map a decoded record to metric samples.

    Generic statistics records (unknown command codes) produce no samples.

    Args:
        record: Decoded StatisticsData or AccountingData.
        default_queue_manager: Label value used when the record has no
            queue-manager name.
        namespace: Metric name prefix; empty for none.

    Returns:
        Samples in a stable order.
    """
    qmgr = record.queue_manager or default_queue_manager
    samples: list[MetricSample] = []

    def add(table: tuple[tuple[str, str], ...], source: object, labels: dict[str, str], kind: str) -> None:
        for suffix, attr in table:
            samples.append(
                MetricSample(
                    name=_metric_name(namespace, suffix),
                    labels=dict(labels),
                    value=float(getattr(source, attr)),
                    kind=kind,  # type: ignore[arg-type]
                )
            )

    if isinstance(record, StatisticsData):
        if record.queue_stats is not None:
            labels = {"queue_manager": qmgr, "queue_name": record.queue_stats.queue_name}
            add(_QUEUE_METRICS, record.queue_stats, labels, "gauge")
        if record.channel_stats is not None:
            labels = {
                "queue_manager": qmgr,
                "channel_name": record.channel_stats.channel_name,
                "connection_name": record.channel_stats.connection_name,
            }
            add(_CHANNEL_METRICS, record.channel_stats, labels, "gauge")
        if record.mqi_stats is not None:
            labels = {"queue_manager": qmgr, "application_name": record.mqi_stats.application_name}
            add(_MQI_METRICS, record.mqi_stats, labels, "gauge")

    elif isinstance(record, AccountingData) and record.operations is not None:
        app_name = record.connection_info.application_name if record.connection_info else ""
        labels = {"queue_manager": qmgr, "application_name": app_name}
        add(_MQI_METRICS, record.operations, labels, "counter")

    return samples
