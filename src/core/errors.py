"""Handover exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each decoding stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class HandoverError(Exception):
    """Base exception for all Handover failures."""


class ConfigError(HandoverError):
    """Raised for invalid runtime configuration."""


class InvalidInputError(HandoverError):
    """Raised when the fill target is absent or not a record."""


class UnsupportedKindError(HandoverError):
    """Raised when a field type is outside the supported kind set."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"unsupported field kind '{type_name}'")


class ParseError(HandoverError):
    """Raised for malformed or out-of-range textual values.

    Attributes:
        value: Offending raw token.
        target: Name of the destination type, e.g. ``int8``.
        reason: Short failure reason.
    """

    def __init__(self, value: str, target: str, reason: str) -> None:
        self.value = value
        self.target = target
        self.reason = reason
        super().__init__(f"parsing {target} from {value!r}: {reason}")


class ResolutionError(HandoverError):
    """Raised when a source resolver fails to produce tokens."""


class DeserializationError(HandoverError):
    """Raised for malformed nested-record payloads."""


class SourceError(HandoverError):
    """Raised when a built-in source cannot be constructed."""


class DecodeError(HandoverError):
    """Structured failure for one field of one fill operation.

    Attributes:
        field: Tag value used to resolve the field.
        source: Tag key of the source that supplied the tokens.
        value: Offending raw value rendered as text.
        cause: Underlying failure.
        field_name: Attribute name of the field on the record.
    """

    def __init__(
        self,
        field: str,
        source: str,
        value: str,
        cause: BaseException,
        field_name: str = "",
    ) -> None:
        self.field = field
        self.source = source
        self.value = value
        self.cause = cause
        self.field_name = field_name
        super().__init__(f"failed to set field {field!r} from source {source!r}: {cause}")


def find_decode_error(error: BaseException | None) -> DecodeError | None:
    """Return the first DecodeError in an exception's cause chain.

    Callers that wrap fill failures in their own exceptions can recover
    the structured field diagnostics with this helper.

    Args:
        error: Exception to inspect, possibly None.

    Returns:
        The DecodeError found, or None.
    """
    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, DecodeError):
            return error
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return None
