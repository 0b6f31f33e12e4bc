"""Handover CLI entry points.

This module exposes commands for inspecting and filling dataclass records.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.fill_command import add_fill_command, run_fill_command
from cli.inspect_command import add_inspect_command, run_inspect_command
from core.config import HandoverConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import HandoverError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="handover",
        description="Fill dataclass records from named sources",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override HANDOVER_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_inspect_command(subparsers)
    add_fill_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Handover CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.log_level)
        if args.command == "inspect":
            return run_inspect_command(args)
        if args.command == "fill":
            return run_fill_command(config, args)
    except HandoverError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(log_level: str | None) -> HandoverConfig:
    """Build config with optional log-level override and apply logging.

    Args:
        log_level: Optional override level.

    Returns:
        Configured runtime config.
    """
    config = HandoverConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    configure_logging(config.log_level)
    return config
