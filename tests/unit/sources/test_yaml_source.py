"""Unit tests for the YAML document source."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.errors import ResolutionError, SourceError
from sources.yaml_file import yaml_source
from tests.fixture_paths import fixture_path


def test_yaml_source_resolves_dotted_scalars_and_lists() -> None:
    """Dotted paths should address nested scalars and lists."""
    source = yaml_source(fixture_path("settings.yaml"))

    assert source.resolve("server.port") == ["9000"]
    assert source.resolve("server.timeout") == ["1m30s"]
    assert source.resolve("server.origins") == ["https://a.example.com", "https://b.example.com"]
    assert source.resolve("server.missing") == []


def test_yaml_source_renders_mappings_dates_and_booleans() -> None:
    """Mappings become JSON objects and dates render in ISO form."""
    source = yaml_source(fixture_path("settings.yaml"))

    assert json.loads(source.resolve("server.limits")[0]) == {"burst": 10, "enabled": True}
    assert source.resolve("server.limits.enabled") == ["true"]
    assert source.resolve("release.published_at") == ["2021-06-01T12:30:00Z"]
    assert source.resolve("release.day") == ["2021-06-01"]


def test_yaml_source_rejects_paths_through_scalars() -> None:
    """Descending into a scalar should be a resolution failure."""
    source = yaml_source(fixture_path("settings.yaml"))

    with pytest.raises(ResolutionError):
        source.resolve("server.port.value")


def test_yaml_source_missing_file_raises_source_error(tmp_path: Path) -> None:
    """Missing files should fail when the source is built."""
    with pytest.raises(SourceError):
        yaml_source(tmp_path / "absent.yaml")


def test_yaml_source_non_mapping_root_raises_source_error(tmp_path: Path) -> None:
    """A YAML list at the root is not a usable document."""
    yaml_file = tmp_path / "list.yaml"
    yaml_file.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(SourceError):
        yaml_source(yaml_file)


def test_yaml_source_invalid_yaml_raises_source_error(tmp_path: Path) -> None:
    """Unparseable YAML should fail with a source error."""
    yaml_file = tmp_path / "broken.yaml"
    yaml_file.write_text("server: [unclosed\n", encoding="utf-8")

    with pytest.raises(SourceError):
        yaml_source(yaml_file)
