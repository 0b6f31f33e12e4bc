"""Unit tests for mapping and header sources."""

from __future__ import annotations

from sources.mappings import header_source, mapping_source


def test_mapping_source_resolves_strings_and_sequences() -> None:
    """Strings give one token, sequences one token per item."""
    source = mapping_source("cfg", {"name": "svc", "hosts": ["a", "b"]})

    assert source.resolve("name") == ["svc"]
    assert source.resolve("hosts") == ["a", "b"]
    assert source.resolve("missing") == []


def test_header_source_matches_names_case_insensitively() -> None:
    """Header lookups should ignore case and keep repeated values in order."""
    source = header_source([("Accept", "text/html"), ("accept", "application/json")])

    assert source.tag_key == "header"
    assert source.resolve("ACCEPT") == ["text/html", "application/json"]


def test_header_source_accepts_mappings() -> None:
    """Mappings of header names to values should also be supported."""
    source = header_source({"X-Request-Id": "abc", "X-Forwarded-For": ["1.1.1.1", "2.2.2.2"]})

    assert source.resolve("x-request-id") == ["abc"]
    assert source.resolve("x-forwarded-for") == ["1.1.1.1", "2.2.2.2"]
