"""Core constants used across Handover modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in decoding logic.
"""

from __future__ import annotations

DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
ENV_PREFIX_VARIABLE = "HANDOVER_ENV_PREFIX"
LIST_SEPARATOR_VARIABLE = "HANDOVER_LIST_SEPARATOR"
LOG_LEVEL_VARIABLE = "HANDOVER_LOG_LEVEL"
DEFAULT_ENV_TAG = "env"
DEFAULT_FLAG_TAG = "flag"
DEFAULT_HEADER_TAG = "header"
DEFAULT_YAML_TAG = "yaml"
JSON_TAG = "json"
TRUE_LITERALS = ("1", "t", "T", "TRUE", "true", "True")
FALSE_LITERALS = ("0", "f", "F", "FALSE", "false", "False")
NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DURATION_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}
MAX_DURATION_NANOSECONDS = (1 << 63) - 1
