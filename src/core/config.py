"""Runtime configuration model for Handover.

This module owns all environment variable parsing for Handover itself.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX_VARIABLE,
    LIST_SEPARATOR_VARIABLE,
    LOG_LEVEL_VARIABLE,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ConfigError


@dataclass(frozen=True)
class HandoverConfig:
    """Validated runtime configuration.

    Attributes:
        env_prefix: Prefix prepended to tag values by the environment source.
        list_separator: Optional separator splitting one variable into tokens.
        log_level: Minimum structlog level emitted by Handover modules.
    """

    env_prefix: str
    list_separator: str | None
    log_level: str

    @classmethod
    def from_env(cls) -> "HandoverConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        env_prefix = os.getenv(ENV_PREFIX_VARIABLE, "")
        separator_value = os.getenv(LIST_SEPARATOR_VARIABLE)
        log_level_value = os.getenv(LOG_LEVEL_VARIABLE, DEFAULT_LOG_LEVEL)
        return cls(
            env_prefix=env_prefix,
            list_separator=separator_value or None,
            log_level=_parse_log_level(log_level_value),
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lower-case level name.

    Raises:
        ConfigError: If value is not a supported level.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise ConfigError(
        f"Invalid {LOG_LEVEL_VARIABLE} value: expected one of {supported_rows}, "
        f"got '{raw_value}'. Set {LOG_LEVEL_VARIABLE} to a supported level."
    )
