"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import build_parser, main


def test_cli_requires_a_command() -> None:
    """Running without a subcommand should be a usage error."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_reports_invalid_target(capsys: pytest.CaptureFixture[str]) -> None:
    """Malformed record targets should print an error and exit non-zero."""
    exit_code = main(["inspect", "no_colon_here"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=Invalid record target")


def test_cli_reports_invalid_log_level_env(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Invalid HANDOVER_LOG_LEVEL should surface as a config error."""
    monkeypatch.setenv("HANDOVER_LOG_LEVEL", "loud")

    exit_code = main(["inspect", "tests.fixtures.sample_records:Greeting"])

    assert exit_code == 1 and "HANDOVER_LOG_LEVEL" in capsys.readouterr().out
