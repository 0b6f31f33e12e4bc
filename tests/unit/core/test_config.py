"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import HandoverConfig
from core.errors import ConfigError


def test_from_env_uses_defaults() -> None:
    """Config should fall back to no prefix, no separator and warning level."""
    config = HandoverConfig.from_env()

    assert config == HandoverConfig(env_prefix="", list_separator=None, log_level="warning")


def test_from_env_reads_prefix_separator_and_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve every setting from environment."""
    monkeypatch.setenv("HANDOVER_ENV_PREFIX", "APP_")
    monkeypatch.setenv("HANDOVER_LIST_SEPARATOR", ";")
    monkeypatch.setenv("HANDOVER_LOG_LEVEL", " DEBUG ")

    config = HandoverConfig.from_env()

    assert (config.env_prefix, config.list_separator, config.log_level) == ("APP_", ";", "debug")


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log levels."""
    monkeypatch.setenv("HANDOVER_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigError):
        HandoverConfig.from_env()
