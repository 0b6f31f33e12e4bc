"""Unit tests for the environment variable source."""

from __future__ import annotations

import pytest

from sources.environment import environment_source


def test_environment_source_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tag values should be prefixed before lookup in os.environ."""
    monkeypatch.setenv("APP_PORT", "9000")
    source = environment_source(prefix="APP_")

    assert source.tag_key == "env" and source.resolve("PORT") == ["9000"]


def test_environment_source_treats_unset_and_empty_as_no_tokens() -> None:
    """Missing and empty variables should resolve to no tokens."""
    source = environment_source(environ={"EMPTY": ""})

    assert source.resolve("EMPTY") == [] and source.resolve("MISSING") == []


def test_environment_source_splits_on_separator() -> None:
    """A configured separator should split one value into several tokens."""
    source = environment_source(separator=",", environ={"HOSTS": "a, b,c"})

    assert source.resolve("HOSTS") == ["a", "b", "c"]
