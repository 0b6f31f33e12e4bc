"""JSON payload conversion for nested record fields.

This module decodes JSON object text into fresh dataclass instances
and renders filled records back into JSON-safe payloads. Subfield keys
come from the ``json`` tag when present, otherwise the field name.
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
import json
from datetime import datetime, timedelta
from typing import Any, Mapping, get_type_hints

from core.constants import JSON_TAG
from core.errors import (
    DeserializationError,
    HandoverError,
    ParseError,
    UnsupportedKindError,
)
from core.types import FieldKind
from decode.duration_parsing import (
    format_duration,
    nanoseconds_to_timedelta,
    timedelta_to_nanoseconds,
)
from decode.kinds import classify
from decode.scalar_parsing import round_float32
from decode.timestamp_parsing import format_timestamp, parse_timestamp


def decode_record_payload(record_type: type, payload_text: str) -> Any:
    """Decode JSON object text into a new instance of ``record_type``.

    Args:
        record_type: Destination dataclass type.
        payload_text: JSON object text.

    Returns:
        Newly constructed record instance.

    Raises:
        DeserializationError: If the text is not valid JSON, is not an
            object, names unknown fields, or holds mistyped values.
    """
    try:
        payload = json.loads(payload_text)
    except ValueError as error:
        raise DeserializationError(f"invalid JSON payload: {error}") from error
    return _build_record(record_type, payload, record_type.__name__)


def record_to_payload(record: Any) -> dict[str, object]:
    """Serialize a dataclass record into JSON-safe data.

    Durations render as duration literals, timestamps as RFC 3339 text
    and byte sequences as base64 strings.

    Args:
        record: Dataclass instance.

    Returns:
        Dictionary keyed by each field's payload key.
    """
    hints = get_type_hints(type(record), include_extras=True)
    payload: dict[str, object] = {}
    for record_field in dataclasses.fields(record):
        key = _payload_key(record_field)
        if key is None:
            continue
        kind = classify(hints[record_field.name])
        payload[key] = _value_to_payload(kind, getattr(record, record_field.name))
    return payload


def _build_record(record_type: type, payload: object, path: str) -> Any:
    if not isinstance(payload, dict):
        raise DeserializationError(
            f"cannot decode JSON {type(payload).__name__} into record {path}"
        )
    hints = _resolved_hints(record_type)
    fields_by_key = _fields_by_key(record_type)
    arguments: dict[str, object] = {}
    for key, value in payload.items():
        record_field = _match_field(fields_by_key, key)
        if record_field is None:
            raise DeserializationError(f"unknown field {key!r} in record {path}")
        kind = classify(hints[record_field.name])
        if value is None and kind.tag != "pointer":
            continue
        arguments[record_field.name] = _convert(kind, value, f"{path}.{key}")
    try:
        return record_type(**arguments)
    except TypeError as error:
        raise DeserializationError(f"cannot construct record {path}: {error}") from error


def _fields_by_key(record_type: type) -> dict[str, dataclasses.Field[Any]]:
    fields_by_key = {}
    for record_field in dataclasses.fields(record_type):
        key = _payload_key(record_field)
        if key is not None and record_field.init:
            fields_by_key[key] = record_field
    return fields_by_key


def _payload_key(record_field: dataclasses.Field[Any]) -> str | None:
    tag_value = record_field.metadata.get(JSON_TAG)
    if not isinstance(tag_value, str):
        return record_field.name
    name = tag_value.split(",", 1)[0]
    if name == "-":
        return None
    return name or record_field.name


def _match_field(
    fields_by_key: Mapping[str, dataclasses.Field[Any]],
    key: str,
) -> dataclasses.Field[Any] | None:
    if key in fields_by_key:
        return fields_by_key[key]
    folded_key = key.casefold()
    for candidate_key, record_field in fields_by_key.items():
        if candidate_key.casefold() == folded_key:
            return record_field
    return None


def _convert(kind: FieldKind, value: object, path: str) -> object:
    """Convert one decoded JSON value into the Python value for ``kind``."""
    if kind.tag == "pointer":
        if value is None:
            return None
        if kind.element is None:
            raise UnsupportedKindError(kind.type_name)
        return _convert(kind.element, value, path)
    if kind.tag == "string":
        return _expect(value, str, path, kind)
    if kind.tag == "bool":
        return _expect(value, bool, path, kind)
    if kind.tag in ("signed_int", "unsigned_int"):
        return _convert_integer(kind, value, path)
    if kind.tag in ("float32", "float64"):
        return _convert_float(kind, value, path)
    if kind.tag == "sequence":
        return _convert_sequence(kind, value, path)
    if kind.tag == "record":
        if kind.semantic == "timestamp":
            text = _expect(value, str, path, kind)
            try:
                return parse_timestamp(text)
            except ParseError as error:
                raise DeserializationError(f"invalid timestamp at {path}: {error}") from error
        if kind.container is None:
            raise UnsupportedKindError(kind.type_name)
        return _build_record(kind.container, value, path)
    raise DeserializationError(f"unsupported field kind '{kind.type_name}' at {path}")


def _convert_integer(kind: FieldKind, value: object, path: str) -> object:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_mismatch(value, path, kind)
    if kind.width is None:
        raise UnsupportedKindError(kind.type_name)
    if kind.tag == "signed_int":
        low, high = -(1 << (kind.width - 1)), (1 << (kind.width - 1)) - 1
    else:
        low, high = 0, (1 << kind.width) - 1
    if not low <= value <= high:
        raise DeserializationError(f"number {value} overflows {kind.type_name} at {path}")
    if kind.semantic == "duration":
        return nanoseconds_to_timedelta(value)
    return value


def _convert_float(kind: FieldKind, value: object, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_mismatch(value, path, kind)
    if kind.tag == "float32":
        try:
            return round_float32(float(value))
        except HandoverError as error:
            raise DeserializationError(f"number {value} overflows float32 at {path}") from error
    return float(value)


def _convert_sequence(kind: FieldKind, value: object, path: str) -> object:
    if kind.element is None or kind.container is None:
        raise UnsupportedKindError(kind.type_name)
    if kind.semantic == "bytes":
        text = _expect(value, str, path, kind)
        try:
            raw = base64.b64decode(text, validate=True)
        except binascii.Error as error:
            raise DeserializationError(f"invalid base64 bytes at {path}: {error}") from error
        return kind.container(raw)
    if not isinstance(value, list):
        raise _type_mismatch(value, path, kind)
    items = [
        _convert(kind.element, item, f"{path}[{index}]") for index, item in enumerate(value)
    ]
    return kind.container(items)


def _expect(value: object, expected: type, path: str, kind: FieldKind) -> Any:
    if not isinstance(value, expected):
        raise _type_mismatch(value, path, kind)
    return value


def _type_mismatch(value: object, path: str, kind: FieldKind) -> DeserializationError:
    return DeserializationError(
        f"cannot decode JSON {type(value).__name__} into {kind.type_name} at {path}"
    )


def _value_to_payload(kind: FieldKind, value: object) -> object:
    if value is None:
        return None
    if kind.tag == "pointer":
        if kind.element is None:
            raise UnsupportedKindError(kind.type_name)
        return _value_to_payload(kind.element, value)
    if kind.semantic == "bytes":
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, timedelta):
        return format_duration(timedelta_to_nanoseconds(value))
    if isinstance(value, datetime):
        return format_timestamp(value)
    if kind.tag == "sequence" and isinstance(value, (list, tuple)):
        if kind.element is None:
            raise UnsupportedKindError(kind.type_name)
        return [_value_to_payload(kind.element, item) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return record_to_payload(value)
    return value


def _resolved_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as error:
        raise DeserializationError(
            f"cannot resolve annotations of record {record_type.__name__}: {error}"
        ) from error
