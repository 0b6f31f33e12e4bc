"""Value coercion engine.

This module converts raw source tokens into typed values by dispatching
on the closed kind set. Values are built bottom-up and written through
the field handle only after the whole field decoded, so a failure never
leaves a partially decoded value visible on the record.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.errors import UnsupportedKindError
from core.types import FieldKind
from decode.duration_parsing import nanoseconds_to_timedelta, parse_duration
from decode.field_inspector import FieldHandle
from decode.record_payload import decode_record_payload
from decode.scalar_parsing import parse_bool, parse_float, parse_signed, parse_unsigned
from decode.timestamp_parsing import parse_timestamp


def coerce(kind: FieldKind, handle: FieldHandle, tokens: Sequence[str]) -> None:
    """Decode tokens for a field and write the value through its handle.

    Args:
        kind: Classified field kind.
        handle: Write handle for the destination field.
        tokens: Non-empty raw tokens resolved by a source.

    Raises:
        ParseError: For malformed scalar text.
        DeserializationError: For malformed nested-record payloads.
        UnsupportedKindError: For kinds outside the supported set.
    """
    handle.set(decode_value(kind, tokens))


def decode_value(kind: FieldKind, tokens: Sequence[str]) -> Any:
    """Decode tokens into a Python value for ``kind``.

    Args:
        kind: Classified destination kind.
        tokens: Non-empty raw tokens.

    Returns:
        Decoded value.
    """
    if kind.tag == "pointer":
        return _decode_pointer(kind, tokens)
    if kind.tag == "sequence":
        return _decode_sequence(kind, tokens)
    if kind.tag == "string":
        return tokens[0]
    if kind.tag == "signed_int":
        return _decode_signed(kind, tokens[0])
    if kind.tag == "unsigned_int":
        return parse_unsigned(tokens[0], _width(kind))
    if kind.tag == "bool":
        return parse_bool(tokens[0])
    if kind.tag == "float32":
        return parse_float(tokens[0], 32)
    if kind.tag == "float64":
        return parse_float(tokens[0], 64)
    if kind.tag == "record":
        return _decode_record(kind, tokens[0])
    raise UnsupportedKindError(kind.type_name)


def _decode_pointer(kind: FieldKind, tokens: Sequence[str]) -> Any:
    if kind.element is None:
        raise UnsupportedKindError(kind.type_name)
    return decode_value(kind.element, tokens)


def _decode_sequence(kind: FieldKind, tokens: Sequence[str]) -> Any:
    """Decode one element per token, or one element per UTF-8 octet of a byte string."""
    if kind.element is None or kind.container is None:
        raise UnsupportedKindError(kind.type_name)
    if kind.semantic == "bytes":
        tokens = [str(octet) for octet in tokens[0].encode("utf-8")]
    elements = [decode_value(kind.element, [token]) for token in tokens]
    return kind.container(elements)


def _decode_signed(kind: FieldKind, token: str) -> Any:
    if kind.semantic == "duration":
        return nanoseconds_to_timedelta(parse_duration(token))
    return parse_signed(token, _width(kind))


def _decode_record(kind: FieldKind, token: str) -> Any:
    if kind.semantic == "timestamp":
        return parse_timestamp(token)
    if kind.container is None:
        raise UnsupportedKindError(kind.type_name)
    return decode_record_payload(kind.container, token)


def _width(kind: FieldKind) -> int:
    return kind.width if kind.width is not None else 64
