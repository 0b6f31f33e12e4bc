"""RFC 3339 timestamp parsing and formatting."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from core.errors import ParseError

_RFC3339_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<zone>Z|[+-][0-9]{2}:[0-9]{2})"
)


def parse_timestamp(token: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Fractional seconds beyond microsecond precision are truncated.

    Args:
        token: Timestamp such as ``2020-01-02T15:04:05Z``.

    Returns:
        Timezone-aware datetime.

    Raises:
        ParseError: On malformed text or out-of-range components.
    """
    match = _RFC3339_PATTERN.fullmatch(token)
    if match is None:
        raise ParseError(token, "timestamp", "expected RFC 3339 layout")
    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=_parse_zone(token, match.group("zone")),
        )
    except ValueError as error:
        raise ParseError(token, "timestamp", str(error)) from error


def format_timestamp(value: datetime) -> str:
    """Render a datetime as RFC 3339, using ``Z`` for UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _parse_zone(token: str, zone: str) -> timezone:
    if zone == "Z":
        return timezone.utc
    hours = int(zone[1:3])
    minutes = int(zone[4:6])
    if hours >= 24 or minutes >= 60:
        raise ParseError(token, "timestamp", "time zone offset out of range")
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if zone[0] == "-" else offset)
