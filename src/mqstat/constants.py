"""Application-wide constants for mqstat.

PCF wire-format constants (structure types, command codes, parameter tags)
and decoder limits. For user-configurable settings, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    "CONFIG_FILE_NAME",
    "SYSTEM_LOG_FILE_NAME",
    # Decoder limits
    "PCF_HEADER_LENGTH",
    "PCF_PARAMETER_HEADER_LENGTH",
    "PCF_MAX_PARAMETER_LENGTH",
    "PCF_ALIGNMENT",
    "BYTE_ORDER_FORMATS",
    "DEFAULT_DUMP_LENGTH",
    # Structure types
    "MQCFT_NONE",
    "MQCFT_COMMAND",
    "MQCFT_RESPONSE",
    "MQCFT_INTEGER",
    "MQCFT_STRING",
    "MQCFT_INTEGER_LIST",
    "MQCFT_STRING_LIST",
    "MQCFT_EVENT",
    "MQCFT_USER",
    "MQCFT_BYTE_STRING",
    "MQCFT_STATISTICS",
    "MQCFT_ACCOUNTING",
    # Command codes
    "MQCMD_STATISTICS_MQI",
    "MQCMD_STATISTICS_Q",
    "MQCMD_STATISTICS_CHANNEL",
    "MQCMD_ACCOUNTING_MQI",
    "MQCMD_ACCOUNTING_Q",
    "STATISTICS_COMMANDS",
    "ACCOUNTING_COMMANDS",
    # Parameter tags
    "MQCA_Q_MGR_NAME",
    "MQCA_Q_NAME",
    "MQCA_CHANNEL_NAME",
    "MQCA_CONNECTION_NAME",
    "MQCA_APPL_NAME",
    "MQIA_Q_TYPE",
    "MQIA_CURRENT_Q_DEPTH",
    "MQIA_HIGH_Q_DEPTH",
    "MQIA_OPEN_INPUT_COUNT",
    "MQIA_OPEN_OUTPUT_COUNT",
    "MQIA_MSG_ENQ_COUNT",
    "MQIA_MSG_DEQ_COUNT",
    "MQIACH_MSGS",
    "MQIACH_BYTES",
    "MQIACH_BATCHES",
    "MQIAMO_OPENS",
    "MQIAMO_CLOSES",
    "MQIAMO_COMMITS",
    "MQIAMO_BACKOUTS",
    "MQIAMO_PUTS",
    "MQIAMO_GETS",
    "MQCACF_COMMAND_TIME",
    "MQIACF_SEQUENCE_NUMBER",
    # Timestamps
    "COMMAND_TIME_FORMATS",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "mqstat"
CONFIG_FILE_NAME = "config.json"
SYSTEM_LOG_FILE_NAME = "system.jsonl"

# =============================================================================
# Decoder limits
# =============================================================================

# MQCFH is nine 32-bit fields
PCF_HEADER_LENGTH = 36

# Parameter sub-header: tag, type, length
PCF_PARAMETER_HEADER_LENGTH = 12

# Declared lengths above this are treated as corrupt
PCF_MAX_PARAMETER_LENGTH = 65536

PCF_ALIGNMENT = 4

# struct prefixes for the two supported wire byte orders
BYTE_ORDER_FORMATS: dict[str, str] = {
    "little": "<",
    "big": ">",
}

# Bytes shown by `mqstat dump` when --length is not given
DEFAULT_DUMP_LENGTH = 64

# =============================================================================
# Structure types (MQCFT_*)
# =============================================================================

MQCFT_NONE = 0x00
MQCFT_COMMAND = 0x01
MQCFT_RESPONSE = 0x02
MQCFT_INTEGER = 0x03
MQCFT_STRING = 0x04
MQCFT_INTEGER_LIST = 0x05
MQCFT_STRING_LIST = 0x06
MQCFT_EVENT = 0x07
MQCFT_USER = 0x08
MQCFT_BYTE_STRING = 0x09
MQCFT_STATISTICS = 0x14
MQCFT_ACCOUNTING = 0x15

# =============================================================================
# Command codes (MQCMD_*)
# =============================================================================

MQCMD_STATISTICS_MQI = 0x70
MQCMD_STATISTICS_Q = 0x71
MQCMD_STATISTICS_CHANNEL = 0x72

MQCMD_ACCOUNTING_MQI = 0x8A
MQCMD_ACCOUNTING_Q = 0x8B

STATISTICS_COMMANDS: frozenset[int] = frozenset(
    {MQCMD_STATISTICS_MQI, MQCMD_STATISTICS_Q, MQCMD_STATISTICS_CHANNEL}
)
ACCOUNTING_COMMANDS: frozenset[int] = frozenset({MQCMD_ACCOUNTING_MQI, MQCMD_ACCOUNTING_Q})

# =============================================================================
# Parameter tags
# =============================================================================

# Names (MQCA_*)
MQCA_Q_MGR_NAME = 2002
MQCA_Q_NAME = 2016
MQCA_APPL_NAME = 2024
MQCA_CHANNEL_NAME = 3501
MQCA_CONNECTION_NAME = 3502

# Queue attributes and statistics (MQIA_*)
MQIA_CURRENT_Q_DEPTH = 3
MQIA_Q_TYPE = 20
MQIA_HIGH_Q_DEPTH = 36
MQIA_MSG_ENQ_COUNT = 37  # PUT count
MQIA_MSG_DEQ_COUNT = 38  # GET count
MQIA_OPEN_INPUT_COUNT = 65
MQIA_OPEN_OUTPUT_COUNT = 66

# Channel statistics (MQIACH_*)
MQIACH_MSGS = 1501
MQIACH_BYTES = 1502
MQIACH_BATCHES = 1503

# MQI operation counters (MQIAMO_*). These overlap numerically with MQIA_*
# tags; the command code decides which set applies.
MQIAMO_OPENS = 3
MQIAMO_CLOSES = 4
MQIAMO_COMMITS = 12
MQIAMO_BACKOUTS = 13
MQIAMO_PUTS = 17
MQIAMO_GETS = 18

# Command metadata (MQCACF_* / MQIACF_*)
MQIACF_SEQUENCE_NUMBER = 1001
MQCACF_COMMAND_TIME = 3603

# =============================================================================
# Timestamps
# =============================================================================

# Tried in order; first match wins
COMMAND_TIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y%m%d%H%M%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
)
