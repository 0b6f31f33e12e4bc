"""Command-line flag source.

Flags are read from an argument vector in ``--name value`` or
``--name=value`` form. Repeating a flag yields one token per occurrence,
and a flag followed by another flag or by the end of the vector yields
``"true"``. Parsing stops at a bare ``--``.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import DEFAULT_FLAG_TAG
from core.types import Source

_FLAG_PREFIX = "--"
_IMPLICIT_FLAG_VALUE = "true"


def argument_source(argv: Sequence[str], tag_key: str = DEFAULT_FLAG_TAG) -> Source:
    """Build a source resolving flag names against an argument vector.

    Args:
        argv: Argument vector without the program name.
        tag_key: Tag key the source answers to.

    Returns:
        Flag-backed source.
    """
    flags = parse_flags(argv)

    def resolve(name: str) -> list[str]:
        return list(flags.get(name, []))

    return Source(tag_key=tag_key, resolve=resolve)


def parse_flags(argv: Sequence[str]) -> dict[str, list[str]]:
    """Group flag values by flag name, preserving occurrence order.

    Args:
        argv: Argument vector without the program name.

    Returns:
        Mapping of flag name to its values.
    """
    flags: dict[str, list[str]] = {}
    index = 0
    while index < len(argv):
        argument = argv[index]
        index += 1
        if argument == _FLAG_PREFIX:
            break
        if not argument.startswith(_FLAG_PREFIX) or len(argument) == len(_FLAG_PREFIX):
            continue
        name, separator, value = argument[len(_FLAG_PREFIX) :].partition("=")
        if not separator:
            if index < len(argv) and not argv[index].startswith(_FLAG_PREFIX):
                value = argv[index]
                index += 1
            else:
                value = _IMPLICIT_FLAG_VALUE
        flags.setdefault(name, []).append(value)
    return flags
