"""Declarative helpers for tagging record fields with source keys."""

from __future__ import annotations

import dataclasses
from typing import Any


def tagged_field(
    default: Any = dataclasses.MISSING,
    *,
    default_factory: Any = dataclasses.MISSING,
    **tags: str,
) -> Any:
    """Declare a dataclass field carrying source tags.

    Example:
        ``port: int = tagged_field(8080, env="PORT", flag="port")``

    Args:
        default: Optional default value.
        default_factory: Optional zero-argument default factory.
        **tags: Source tag key to tag value pairs.

    Returns:
        A ``dataclasses.field`` with the tags stored as metadata.
    """
    return dataclasses.field(default=default, default_factory=default_factory, metadata=tags)
