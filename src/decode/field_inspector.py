"""Field inspection for dataclass records.

This module describes a record instance as an ordered descriptor table
and hands out write handles addressing each field's storage slot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, get_type_hints

from core.errors import InvalidInputError
from core.types import FieldDescriptor
from decode.kinds import classify


@dataclass(frozen=True)
class RecordInspection:
    """Descriptor table for one record instance.

    Attributes:
        record: Inspected record instance.
        descriptors: Field descriptors in declaration order.
    """

    record: Any
    descriptors: tuple[FieldDescriptor, ...]


@dataclass(frozen=True)
class FieldHandle:
    """Settable reference to one field of a record instance."""

    record: Any
    name: str
    writable: bool

    def set(self, value: object) -> None:
        """Assign ``value`` to the referenced field."""
        setattr(self.record, self.name, value)


def inspect_record(record: object) -> RecordInspection:
    """Build the ordered descriptor table for a record instance.

    Args:
        record: Dataclass instance to describe.

    Returns:
        Inspection holding the record and its field descriptors.

    Raises:
        InvalidInputError: If record is None, not a dataclass instance,
            or its annotations cannot be resolved.
    """
    if record is None:
        raise InvalidInputError("target is None")
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise InvalidInputError(
            f"target must be a dataclass instance, got {type(record).__name__}"
        )
    try:
        hints = get_type_hints(type(record), include_extras=True)
    except (NameError, TypeError) as error:
        raise InvalidInputError(
            f"cannot resolve field annotations of {type(record).__name__}: {error}"
        ) from error
    descriptors = tuple(
        FieldDescriptor(
            name=record_field.name,
            index=index,
            kind=classify(hints[record_field.name]),
            tags=_string_tags(record_field),
        )
        for index, record_field in enumerate(dataclasses.fields(record))
    )
    return RecordInspection(record=record, descriptors=descriptors)


def handle_for(inspection: RecordInspection, descriptor: FieldDescriptor) -> FieldHandle:
    """Return the write handle for the field a descriptor addresses.

    Fields whose name starts with an underscore, and every field of a
    frozen dataclass, are reported as not writable.
    """
    record_field = dataclasses.fields(inspection.record)[descriptor.index]
    frozen = type(inspection.record).__dataclass_params__.frozen
    return FieldHandle(
        record=inspection.record,
        name=record_field.name,
        writable=not frozen and not record_field.name.startswith("_"),
    )


def _string_tags(record_field: dataclasses.Field[Any]) -> dict[str, str]:
    return {
        key: value
        for key, value in record_field.metadata.items()
        if isinstance(key, str) and isinstance(value, str)
    }
