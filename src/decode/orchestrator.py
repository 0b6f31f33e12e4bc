"""Source orchestration for record filling.

This module walks a record's fields against an ordered list of sources,
resolves raw tokens for every tagged field and delegates decoding to the
coercion engine. The first failure aborts the whole fill operation.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import (
    DecodeError,
    HandoverError,
    InvalidInputError,
    ParseError,
    ResolutionError,
)
from core.logging_config import get_logger
from core.types import FieldDescriptor, Source
from decode.coercion import coerce
from decode.field_inspector import handle_for, inspect_record

_LOGGER = get_logger(__name__)


def fill(record: object, sources: Sequence[Source]) -> None:
    """Populate a record's tagged fields from sources, in place.

    Fields are visited in declaration order and, for each field, sources
    in the given order. Every source whose tag key appears in the
    field's tags writes the field, so the last applicable source wins.
    Fields written before a failure keep their new values.

    Args:
        record: Dataclass instance to populate.
        sources: Ordered sources to resolve tokens from.

    Raises:
        InvalidInputError: If record is None or not a dataclass instance.
        DecodeError: If a resolver fails or tokens cannot be decoded.
    """
    if record is None:
        raise InvalidInputError("target is None")
    if not sources:
        return
    inspection = inspect_record(record)
    _LOGGER.debug(
        "record_fill_started",
        record_type=type(record).__name__,
        field_count=len(inspection.descriptors),
        source_count=len(sources),
    )
    filled_count = 0
    for descriptor in inspection.descriptors:
        for source in sources:
            tag_value = descriptor.tags.get(source.tag_key)
            if tag_value is None:
                continue
            handle = handle_for(inspection, descriptor)
            if not handle.writable:
                _LOGGER.debug(
                    "field_skipped_unwritable",
                    field=descriptor.name,
                    source=source.tag_key,
                )
                continue
            tokens = _resolve_tokens(descriptor, source, tag_value)
            if not tokens:
                continue
            try:
                coerce(descriptor.kind, handle, tokens)
            except HandoverError as error:
                raise _decode_failure(descriptor, source, tag_value, tokens, error) from error
            filled_count += 1
            _LOGGER.debug("field_filled", field=descriptor.name, source=source.tag_key)
    _LOGGER.debug(
        "record_fill_completed",
        record_type=type(record).__name__,
        filled_count=filled_count,
    )


def _resolve_tokens(
    descriptor: FieldDescriptor,
    source: Source,
    tag_value: str,
) -> list[str]:
    """Call a source resolver and wrap any failure into a decode error."""
    try:
        tokens = source.resolve(tag_value)
    except Exception as error:
        cause = error if isinstance(error, ResolutionError) else ResolutionError(str(error))
        if cause is not error:
            cause.__cause__ = error
        raise _decode_failure(descriptor, source, tag_value, [], cause) from cause
    if isinstance(tokens, (str, bytes)):
        cause = ResolutionError(
            f"resolver for source {source.tag_key!r} returned {type(tokens).__name__}, "
            "expected a sequence of strings"
        )
        raise _decode_failure(descriptor, source, tag_value, [], cause)
    return list(tokens or ())


def _decode_failure(
    descriptor: FieldDescriptor,
    source: Source,
    tag_value: str,
    tokens: Sequence[str],
    cause: BaseException,
) -> DecodeError:
    _LOGGER.warning(
        "record_fill_failed",
        field=descriptor.name,
        source=source.tag_key,
        error_type=type(cause).__name__,
    )
    return DecodeError(
        field=tag_value,
        source=source.tag_key,
        value=_offending_value(tokens, cause),
        cause=cause,
        field_name=descriptor.name,
    )


def _offending_value(tokens: Sequence[str], cause: BaseException) -> str:
    if isinstance(cause, ParseError):
        return cause.value
    if not tokens:
        return ""
    if len(tokens) == 1:
        return tokens[0]
    return "[" + " ".join(tokens) + "]"
