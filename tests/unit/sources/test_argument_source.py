"""Unit tests for the command-line flag source."""

from __future__ import annotations

from sources.arguments import argument_source, parse_flags


def test_parse_flags_supports_separate_and_inline_values() -> None:
    """Both --name value and --name=value forms should be recognized."""
    flags = parse_flags(["--port", "9000", "--host=example.com", "positional"])

    assert flags == {"port": ["9000"], "host": ["example.com"]}


def test_parse_flags_collects_repeats_and_implicit_true() -> None:
    """Repeated flags accumulate and value-less flags resolve to true."""
    flags = parse_flags(["--tag", "a", "--verbose", "--tag", "b", "--dry-run"])

    assert flags == {"tag": ["a", "b"], "verbose": ["true"], "dry-run": ["true"]}


def test_parse_flags_stops_at_double_dash() -> None:
    """Arguments after a bare -- are not flags."""
    assert parse_flags(["--a", "1", "--", "--b", "2"]) == {"a": ["1"]}


def test_argument_source_resolves_flag_names() -> None:
    """The source should answer tag values with the flag's tokens."""
    source = argument_source(["--level", "-3"])

    assert source.tag_key == "flag"
    assert source.resolve("level") == ["-3"] and source.resolve("missing") == []
