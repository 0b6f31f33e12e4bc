"""YAML document source.

Tag values are dotted key paths into a YAML mapping, e.g. ``server.port``.
Scalars resolve to one token, lists to one token per item and nested
mappings to a single JSON object token suitable for record fields.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import DEFAULT_YAML_TAG
from core.errors import ResolutionError, SourceError
from core.types import Source
from decode.timestamp_parsing import format_timestamp


def yaml_source(path: str | Path, tag_key: str = DEFAULT_YAML_TAG) -> Source:
    """Build a source over a YAML file.

    Args:
        path: YAML file path.
        tag_key: Tag key the source answers to.

    Returns:
        YAML-backed source.

    Raises:
        SourceError: If the file is missing, unreadable, invalid YAML, or
            its root is not a mapping.
    """
    document = load_yaml_mapping(path)

    def resolve(key_path: str) -> list[str]:
        return _tokens_for(_lookup(document, key_path))

    return Source(tag_key=tag_key, resolve=resolve)


def load_yaml_mapping(path: str | Path) -> Mapping[str, object]:
    """Load a YAML file whose root is a mapping.

    Args:
        path: YAML file path.

    Returns:
        Parsed root mapping, empty for an empty document.

    Raises:
        SourceError: If the file cannot be read or parsed.
    """
    yaml_file = Path(path).expanduser().resolve()
    if not yaml_file.exists():
        raise SourceError(f"YAML source file does not exist at {yaml_file}.")
    try:
        payload = cast(object, yaml.safe_load(yaml_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise SourceError(f"Failed to read YAML source at {yaml_file}: {error}.") from error
    except yaml.YAMLError as error:
        raise SourceError(f"Failed to parse YAML source at {yaml_file}: {error}.") from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise SourceError(
            f"YAML source at {yaml_file} must contain a mapping, got {type(payload).__name__}."
        )
    return payload


def _lookup(document: Mapping[str, object], key_path: str) -> object:
    current: object = document
    for key in key_path.split("."):
        if not isinstance(current, Mapping):
            raise ResolutionError(f"YAML key '{key_path}' does not address a mapping entry.")
        if key not in current:
            return None
        current = current[key]
    return current


def _tokens_for(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [_scalar_text(item) for item in value]
    return [_scalar_text(value)]


def _scalar_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (Mapping, list)):
        return json.dumps(value, default=_json_default, sort_keys=True)
    return str(value)


def _json_default(value: object) -> object:
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
