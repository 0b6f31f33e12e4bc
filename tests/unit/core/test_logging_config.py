"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest

from core.logging_config import configure_logging, get_logger


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Events below the configured level should not be rendered."""
    configure_logging("warning")
    logger = get_logger("tests.logging")

    logger.debug("hidden_event")
    logger.warning("shown_event", field="port")

    lines = capsys.readouterr().err.strip().splitlines()
    payload = json.loads(lines[-1])
    assert len(lines) == 1
    assert (payload["event"], payload["level"], payload["field"]) == ("shown_event", "warning", "port")
