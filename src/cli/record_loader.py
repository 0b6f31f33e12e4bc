"""Record class loading for CLI targets."""

from __future__ import annotations

import dataclasses
import importlib
from typing import Any

from core.errors import InvalidInputError


def load_record_type(target: str) -> type:
    """Import a dataclass from a ``module:ClassName`` target.

    Args:
        target: Import target such as ``myapp.settings:Settings``.

    Returns:
        The dataclass type.

    Raises:
        InvalidInputError: If the target is malformed, cannot be imported,
            or does not name a dataclass.
    """
    module_name, separator, attribute_path = target.partition(":")
    if not separator or not module_name or not attribute_path:
        raise InvalidInputError(
            f"Invalid record target '{target}'. Use the form 'module:ClassName'."
        )
    try:
        resolved: Any = importlib.import_module(module_name)
    except ImportError as error:
        raise InvalidInputError(f"Cannot import module '{module_name}': {error}") from error
    for attribute in attribute_path.split("."):
        if not hasattr(resolved, attribute):
            raise InvalidInputError(f"Module '{module_name}' has no attribute '{attribute_path}'.")
        resolved = getattr(resolved, attribute)
    if not isinstance(resolved, type) or not dataclasses.is_dataclass(resolved):
        raise InvalidInputError(f"Record target '{target}' is not a dataclass.")
    return resolved


def instantiate_record(record_type: type) -> Any:
    """Create a record with every field at its default value.

    Raises:
        InvalidInputError: If some field has no default.
    """
    try:
        return record_type()
    except TypeError as error:
        raise InvalidInputError(
            f"Record {record_type.__name__} needs defaults for every field: {error}"
        ) from error
