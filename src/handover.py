"""Public SDK surface for Handover.

This module provides a stable import path for library users.
It re-exports the fill entry point, sources, typed models and errors.
"""

from __future__ import annotations

from core.config import HandoverConfig
from core.errors import (
    DecodeError,
    DeserializationError,
    HandoverError,
    InvalidInputError,
    ParseError,
    ResolutionError,
    SourceError,
    UnsupportedKindError,
    find_decode_error,
)
from core.tagging import tagged_field
from core.types import (
    FieldDescriptor,
    FieldKind,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Source,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from decode.field_inspector import inspect_record
from decode.orchestrator import fill
from decode.record_payload import record_to_payload
from sources.arguments import argument_source
from sources.environment import environment_source
from sources.mappings import header_source, mapping_source
from sources.yaml_file import yaml_source

__all__ = [
    "DecodeError",
    "DeserializationError",
    "FieldDescriptor",
    "FieldKind",
    "Float32",
    "Float64",
    "HandoverConfig",
    "HandoverError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidInputError",
    "ParseError",
    "ResolutionError",
    "Source",
    "SourceError",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnsupportedKindError",
    "argument_source",
    "environment_source",
    "fill",
    "find_decode_error",
    "header_source",
    "inspect_record",
    "mapping_source",
    "record_to_payload",
    "tagged_field",
    "yaml_source",
]
