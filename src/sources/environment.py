"""Environment variable source."""

from __future__ import annotations

import os
from typing import Mapping

from core.constants import DEFAULT_ENV_TAG
from core.types import Source


def environment_source(
    tag_key: str = DEFAULT_ENV_TAG,
    prefix: str = "",
    separator: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Source:
    """Build a source reading variables named by ``prefix + tag value``.

    Unset and empty variables produce no tokens. When ``separator`` is
    given, a value is split into one token per item.

    Args:
        tag_key: Tag key the source answers to.
        prefix: Prefix prepended to every variable name.
        separator: Optional item separator for list values.
        environ: Variable mapping, defaults to ``os.environ`` at lookup time.

    Returns:
        Environment-backed source.
    """

    def resolve(name: str) -> list[str]:
        variables = os.environ if environ is None else environ
        value = variables.get(prefix + name)
        if not value:
            return []
        if separator is None:
            return [value]
        return [item.strip() for item in value.split(separator)]

    return Source(tag_key=tag_key, resolve=resolve)
