"""Shared typed models.

This module defines the immutable models exchanged between the field
inspector, the coercion engine, the source orchestrator and sources,
plus the annotation aliases that select integer width and float precision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Callable, Literal, Mapping, Sequence, get_origin

KindTag = Literal[
    "pointer",
    "sequence",
    "string",
    "signed_int",
    "unsigned_int",
    "bool",
    "float32",
    "float64",
    "record",
    "unsupported",
]
SemanticType = Literal["duration", "timestamp", "bytes"]
Resolver = Callable[[str], Sequence[str]]


@dataclass(frozen=True)
class IntegerWidth:
    """Annotation marker selecting a fixed-width integer kind."""

    bits: int
    signed: bool = True


@dataclass(frozen=True)
class FloatPrecision:
    """Annotation marker selecting a float precision kind."""

    bits: int


Int8 = Annotated[int, IntegerWidth(8)]
Int16 = Annotated[int, IntegerWidth(16)]
Int32 = Annotated[int, IntegerWidth(32)]
Int64 = Annotated[int, IntegerWidth(64)]
UInt = Annotated[int, IntegerWidth(64, signed=False)]
UInt8 = Annotated[int, IntegerWidth(8, signed=False)]
UInt16 = Annotated[int, IntegerWidth(16, signed=False)]
UInt32 = Annotated[int, IntegerWidth(32, signed=False)]
UInt64 = Annotated[int, IntegerWidth(64, signed=False)]
Float32 = Annotated[float, FloatPrecision(32)]
Float64 = Annotated[float, FloatPrecision(64)]


@dataclass(frozen=True)
class FieldKind:
    """Closed kind classification of one field type.

    Attributes:
        tag: Kind tag driving coercion dispatch.
        annotation: Original annotation the kind was derived from.
        width: Bit width for integer kinds.
        semantic: Semantic refinement (duration, timestamp, bytes).
        element: Pointee or element kind for pointer and sequence kinds.
        container: Concrete container type for sequence and record kinds.
    """

    tag: KindTag
    annotation: object
    width: int | None = None
    semantic: SemanticType | None = None
    element: FieldKind | None = None
    container: type | None = None

    @property
    def type_name(self) -> str:
        """Readable destination type name used in error messages."""
        if self.tag == "signed_int":
            return "duration" if self.semantic == "duration" else f"int{self.width}"
        if self.tag == "unsigned_int":
            return f"uint{self.width}"
        if self.tag == "record" and self.semantic == "timestamp":
            return "timestamp"
        origin = get_origin(self.annotation) or self.annotation
        return getattr(origin, "__name__", None) or repr(self.annotation)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static metadata about one record field.

    Attributes:
        name: Attribute name.
        index: Zero-based declaration index.
        kind: Classified field kind.
        tags: String-valued tag metadata keyed by source tag key.
    """

    name: str
    index: int
    kind: FieldKind
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Source:
    """Named provider of raw string tokens.

    Attributes:
        tag_key: Metadata key identifying fields this source supplies.
        resolve: Callable mapping a tag value to raw tokens; raises on failure.
    """

    tag_key: str
    resolve: Resolver
