"""Mapping-backed sources, including case-insensitive HTTP headers."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Union

from core.constants import DEFAULT_HEADER_TAG
from core.types import Source

MappingValue = Union[str, Sequence[str]]
HeaderInput = Union[Mapping[str, MappingValue], Iterable[tuple[str, str]]]


def mapping_source(tag_key: str, values: Mapping[str, MappingValue]) -> Source:
    """Build a source answering tag values from a plain mapping.

    String values resolve to one token, sequences to one token per item
    and absent keys to no tokens.
    """

    def resolve(key: str) -> list[str]:
        return _as_tokens(values.get(key))

    return Source(tag_key=tag_key, resolve=resolve)


def header_source(headers: HeaderInput, tag_key: str = DEFAULT_HEADER_TAG) -> Source:
    """Build a source over HTTP headers.

    Header names match case-insensitively. Repeated headers, given either
    as a sequence value or as repeated ``(name, value)`` pairs, resolve to
    one token per occurrence in order.

    Args:
        headers: Header mapping or iterable of name/value pairs.
        tag_key: Tag key the source answers to.

    Returns:
        Header-backed source.
    """
    folded: dict[str, list[str]] = {}
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in pairs:
        folded.setdefault(name.casefold(), []).extend(_as_tokens(value))

    def resolve(name: str) -> list[str]:
        return list(folded.get(name.casefold(), []))

    return Source(tag_key=tag_key, resolve=resolve)


def _as_tokens(value: MappingValue | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]
