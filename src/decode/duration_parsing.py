"""Duration literal parsing and formatting.

Durations are written as a signed sequence of decimal numbers with unit
suffixes, such as ``300ms``, ``-1.5h`` or ``2h45m``. Valid units are
``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. Values are
computed as integer nanoseconds and must fit a signed 64-bit integer.
"""

from __future__ import annotations

import re
from datetime import timedelta

from core.constants import (
    DURATION_UNITS,
    MAX_DURATION_NANOSECONDS,
    MICROSECOND,
    MILLISECOND,
    SECOND,
)
from core.errors import ParseError

_COMPONENT_PATTERN = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_MAX_WHOLE_DIGITS = len(str(MAX_DURATION_NANOSECONDS))


def parse_duration(token: str) -> int:
    """Parse a duration literal into signed nanoseconds.

    Args:
        token: Duration literal such as ``1h30m``.

    Returns:
        Duration in nanoseconds.

    Raises:
        ParseError: On malformed literals, unknown units or overflow.
    """
    text = token
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        raise ParseError(token, "duration", "invalid duration")
    total = 0
    position = 0
    while position < len(text):
        match = _COMPONENT_PATTERN.match(text, position)
        if match is None or match.end() == position:
            raise ParseError(token, "duration", "invalid duration")
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ParseError(token, "duration", "invalid duration")
        if not unit:
            raise ParseError(token, "duration", "missing unit in duration")
        if unit not in DURATION_UNITS:
            raise ParseError(token, "duration", f"unknown unit {unit!r} in duration")
        scale = DURATION_UNITS[unit]
        whole = whole.lstrip("0")
        if len(whole) > _MAX_WHOLE_DIGITS:
            raise ParseError(token, "duration", "invalid duration")
        total += int(whole or "0") * scale
        if fraction:
            total += _scaled_fraction(fraction, scale)
        if total > MAX_DURATION_NANOSECONDS + (1 if negative else 0):
            raise ParseError(token, "duration", "invalid duration")
        position = match.end()
    return -total if negative else total


def _scaled_fraction(fraction: str, scale: int) -> int:
    """Return floor(0.<fraction> * scale) without converting the digits to one integer."""
    carry = 0
    for digit in reversed(fraction):
        carry = (int(digit) * scale + carry) // 10
    return carry


def nanoseconds_to_timedelta(nanoseconds: int) -> timedelta:
    """Convert nanoseconds to a timedelta, truncating toward zero."""
    microseconds = abs(nanoseconds) // MICROSECOND
    return timedelta(microseconds=-microseconds if nanoseconds < 0 else microseconds)


def timedelta_to_nanoseconds(value: timedelta) -> int:
    """Convert a timedelta into whole nanoseconds."""
    seconds = value.days * 86400 + value.seconds
    return seconds * SECOND + value.microseconds * MICROSECOND


def format_duration(nanoseconds: int) -> str:
    """Render nanoseconds as a duration literal, e.g. ``1h0m0s``.

    The output is accepted by :func:`parse_duration` and reproduces the
    same value.
    """
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    remaining = abs(nanoseconds)
    if remaining < MICROSECOND:
        return f"{sign}{remaining}ns"
    if remaining < MILLISECOND:
        whole, fraction = divmod(remaining, MICROSECOND)
        return f"{sign}{whole}{_fraction_text(fraction, 3)}µs"
    if remaining < SECOND:
        whole, fraction = divmod(remaining, MILLISECOND)
        return f"{sign}{whole}{_fraction_text(fraction, 6)}ms"
    seconds, fraction = divmod(remaining, SECOND)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{seconds}{_fraction_text(fraction, 9)}s"
    if minutes or hours:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return f"{sign}{text}"


def _fraction_text(fraction: int, digits: int) -> str:
    trimmed = str(fraction).rjust(digits, "0").rstrip("0")
    return f".{trimmed}" if trimmed else ""
