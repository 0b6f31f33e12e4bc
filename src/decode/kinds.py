"""Kind classification for field annotations.

This module maps resolved Python annotations onto the closed kind set
used by the coercion engine. Unknown shapes classify as unsupported
instead of raising so the failure surfaces for the field being filled.
"""

from __future__ import annotations

import dataclasses
import types
from datetime import datetime, timedelta
from typing import Annotated, Any, Union, get_args, get_origin

from core.types import FieldKind, FloatPrecision, IntegerWidth

DEFAULT_INT_WIDTH = 64


def classify(annotation: object) -> FieldKind:
    """Classify one resolved annotation into a field kind.

    Args:
        annotation: Annotation from ``typing.get_type_hints(include_extras=True)``.

    Returns:
        Field kind with element kinds classified recursively.
    """
    origin = get_origin(annotation)
    if origin is Annotated:
        return _classify_annotated(annotation)
    if origin is Union or origin is types.UnionType:
        return _classify_union(annotation)
    if origin is list:
        return _sequence_kind(annotation, list, _single_argument(annotation))
    if origin is tuple:
        return _classify_tuple(annotation)
    if annotation is list:
        return _sequence_kind(annotation, list, Any)
    if annotation is bool:
        return FieldKind(tag="bool", annotation=annotation)
    if annotation is int:
        return FieldKind(tag="signed_int", annotation=annotation, width=DEFAULT_INT_WIDTH)
    if annotation is float:
        return FieldKind(tag="float64", annotation=annotation)
    if annotation is str:
        return FieldKind(tag="string", annotation=annotation)
    if annotation is bytes or annotation is bytearray:
        return _byte_sequence_kind(annotation, annotation)
    if annotation is timedelta:
        return FieldKind(
            tag="signed_int",
            annotation=annotation,
            width=DEFAULT_INT_WIDTH,
            semantic="duration",
        )
    if annotation is datetime:
        return FieldKind(tag="record", annotation=annotation, semantic="timestamp")
    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return FieldKind(tag="record", annotation=annotation, container=annotation)
    return FieldKind(tag="unsupported", annotation=annotation)


def is_byte_kind(kind: FieldKind) -> bool:
    """Return whether a kind is the unsigned 8-bit byte kind."""
    return kind.tag == "unsigned_int" and kind.width == 8


def _classify_annotated(annotation: object) -> FieldKind:
    base, *markers = get_args(annotation)
    for marker in markers:
        if isinstance(marker, IntegerWidth) and base is int:
            return FieldKind(
                tag="signed_int" if marker.signed else "unsigned_int",
                annotation=annotation,
                width=marker.bits,
            )
        if isinstance(marker, FloatPrecision) and base is float:
            return FieldKind(
                tag="float32" if marker.bits == 32 else "float64",
                annotation=annotation,
            )
    return classify(base)


def _classify_union(annotation: object) -> FieldKind:
    members = [member for member in get_args(annotation) if member is not type(None)]
    if len(members) != 1:
        return FieldKind(tag="unsupported", annotation=annotation)
    return FieldKind(tag="pointer", annotation=annotation, element=classify(members[0]))


def _classify_tuple(annotation: object) -> FieldKind:
    arguments = get_args(annotation)
    if len(arguments) == 2 and arguments[1] is Ellipsis:
        return _sequence_kind(annotation, tuple, arguments[0])
    return FieldKind(tag="unsupported", annotation=annotation)


def _sequence_kind(annotation: object, container: type, element: object) -> FieldKind:
    element_kind = classify(element)
    if is_byte_kind(element_kind):
        return _byte_sequence_kind(annotation, container)
    return FieldKind(
        tag="sequence",
        annotation=annotation,
        element=element_kind,
        container=container,
    )


def _byte_sequence_kind(annotation: object, container: type) -> FieldKind:
    byte_kind = FieldKind(tag="unsigned_int", annotation=int, width=8)
    return FieldKind(
        tag="sequence",
        annotation=annotation,
        semantic="bytes",
        element=byte_kind,
        container=container,
    )


def _single_argument(annotation: object) -> object:
    arguments = get_args(annotation)
    return arguments[0] if arguments else Any
