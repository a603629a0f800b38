"""PCF (Programmable Command Format) message decoding.

- header: fixed 36-byte MQCFH decoding
- parameters: parameter stream and value decoding
- timestamps: command-time parsing
- builder: typed statistics/accounting records, reader/writer flags
- decoder: PCFDecoder facade with injected logger
- batch: batch decoding with drop counting
- samples: metric samples for the exporter boundary
"""

from mqstat.pcf.batch import BatchResult, decode_batch
from mqstat.pcf.builder import build_record, classify_queue_activity
from mqstat.pcf.decoder import PCFDecoder
from mqstat.pcf.header import decode_header, encode_header
from mqstat.pcf.parameters import decode_parameters, encode_parameter, resolve_value
from mqstat.pcf.samples import MetricSample, record_samples
from mqstat.pcf.timestamps import parse_command_time

__all__ = [
    "BatchResult",
    "MetricSample",
    "PCFDecoder",
    "build_record",
    "classify_queue_activity",
    "decode_batch",
    "decode_header",
    "decode_parameters",
    "encode_header",
    "encode_parameter",
    "parse_command_time",
    "record_samples",
    "resolve_value",
]
