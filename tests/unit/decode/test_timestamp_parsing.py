"""Unit tests for RFC 3339 timestamp parsing."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from core.errors import ParseError
from decode.timestamp_parsing import format_timestamp, parse_timestamp


def test_parse_timestamp_with_utc_designator() -> None:
    """A Z suffix should produce a UTC-aware datetime."""
    parsed = parse_timestamp("2020-01-02T15:04:05Z")

    assert parsed == datetime(2020, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def test_parse_timestamp_with_offset_and_nanoseconds() -> None:
    """Offsets are kept and fractions beyond microseconds are truncated."""
    parsed = parse_timestamp("2020-01-02T15:04:05.123456789+05:30")

    assert parsed.microsecond == 123456
    assert parsed.utcoffset() == timedelta(hours=5, minutes=30)


@pytest.mark.parametrize(
    "token",
    [
        "2020-01-02",
        "2020-01-02 15:04:05Z",
        "2020-01-02T15:04:05",
        "2020-13-02T15:04:05Z",
        "2020-01-02T25:04:05Z",
        "2020-01-02T15:04:05+24:00",
    ],
)
def test_parse_timestamp_rejects_malformed_text(token: str) -> None:
    """Dates alone, missing zones and out-of-range components are invalid."""
    with pytest.raises(ParseError):
        parse_timestamp(token)


def test_format_timestamp_round_trips() -> None:
    """Formatted timestamps should parse back to the same instant."""
    value = datetime(2021, 6, 1, 12, 30, tzinfo=timezone(timedelta(hours=-7)))

    assert parse_timestamp(format_timestamp(value)) == value
    assert format_timestamp(datetime(2021, 6, 1, tzinfo=timezone.utc)) == "2021-06-01T00:00:00Z"
