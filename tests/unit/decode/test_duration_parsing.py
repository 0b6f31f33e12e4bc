"""Unit tests for duration literal parsing and formatting."""

from __future__ import annotations

from datetime import timedelta

import pytest

from core.constants import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND
from core.errors import ParseError
from decode.duration_parsing import (
    format_duration,
    nanoseconds_to_timedelta,
    parse_duration,
    timedelta_to_nanoseconds,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("0", 0),
        ("1h", HOUR),
        ("30s", 30 * SECOND),
        ("1.5h", 90 * MINUTE),
        ("-2m30s", -(2 * MINUTE + 30 * SECOND)),
        ("+300ms", 300 * MILLISECOND),
        ("1us", MICROSECOND),
        ("1µs", MICROSECOND),
        ("1μs", MICROSECOND),
        ("15ns", 15),
        (".5s", 500 * MILLISECOND),
        ("1h2m3.004s", HOUR + 2 * MINUTE + 3 * SECOND + 4 * MILLISECOND),
    ],
)
def test_parse_duration_literals(token: str, expected: int) -> None:
    """Duration literals should parse into exact nanoseconds."""
    assert parse_duration(token) == expected


@pytest.mark.parametrize("token", ["", "1", "h", ".s", "1x", "1h.", "-", "9223372036854775808ns"])
def test_parse_duration_rejects_malformed_literals(token: str) -> None:
    """Missing units, unknown units, bare signs and overflow are invalid."""
    with pytest.raises(ParseError) as error_info:
        parse_duration(token)

    assert error_info.value.value == token


def test_parse_duration_allows_minimum_negative_value() -> None:
    """The most negative 64-bit nanosecond count should parse."""
    assert parse_duration("-9223372036854775808ns") == -(1 << 63)


@pytest.mark.parametrize(
    ("nanoseconds", "expected"),
    [
        (0, "0s"),
        (HOUR, "1h0m0s"),
        (90 * SECOND, "1m30s"),
        (1500 * MILLISECOND, "1.5s"),
        (100 * MILLISECOND, "100ms"),
        (1500, "1.5µs"),
        (-15, "-15ns"),
    ],
)
def test_format_duration_round_trips(nanoseconds: int, expected: str) -> None:
    """Formatted literals should match the canonical form and parse back."""
    assert format_duration(nanoseconds) == expected
    assert parse_duration(expected) == nanoseconds


def test_timedelta_conversion_truncates_sub_microsecond_values() -> None:
    """Nanoseconds convert to timedelta truncated toward zero."""
    assert nanoseconds_to_timedelta(HOUR) == timedelta(hours=1)
    assert nanoseconds_to_timedelta(-1999) == timedelta(microseconds=-1)
    assert timedelta_to_nanoseconds(timedelta(minutes=1, microseconds=2)) == MINUTE + 2000


def test_parse_duration_rejects_very_long_whole_part() -> None:
    """Whole parts longer than any 64-bit nanosecond count are invalid."""
    token = "1" * 5000 + "s"
    with pytest.raises(ParseError) as error_info:
        parse_duration(token)

    assert error_info.value.reason == "invalid duration"


def test_parse_duration_handles_very_long_fractions() -> None:
    """Long fractional parts truncate to whole nanoseconds."""
    assert parse_duration("0." + "9" * 5000 + "s") == SECOND - 1
    assert parse_duration("1." + "0" * 5000 + "h") == HOUR
