"""CLI command for filling a record from built-in sources."""

from __future__ import annotations

import argparse
import json
from typing import Any

from cli.record_loader import instantiate_record, load_record_type
from core.config import HandoverConfig
from core.errors import DecodeError, HandoverError
from core.types import Source
from decode.orchestrator import fill
from decode.record_payload import record_to_payload
from sources.arguments import argument_source
from sources.environment import environment_source
from sources.mappings import header_source
from sources.yaml_file import yaml_source


def add_fill_command(subparsers: Any) -> None:
    """Register fill subcommand."""
    parser = subparsers.add_parser(
        "fill",
        help="Fill a dataclass record from YAML, environment, headers and flags",
    )
    parser.add_argument("target", help="Record class as module:ClassName")
    parser.add_argument("--yaml", dest="yaml_path", help="YAML file for 'yaml' tagged fields")
    parser.add_argument(
        "--no-env",
        action="store_true",
        help="Do not read 'env' tagged fields from the environment",
    )
    parser.add_argument("--env-prefix", help="Override HANDOVER_ENV_PREFIX for this command")
    parser.add_argument("--separator", help="Override HANDOVER_LIST_SEPARATOR for this command")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Header for 'header' tagged fields; repeatable",
    )
    parser.add_argument(
        "flag_args",
        nargs=argparse.REMAINDER,
        help="Flags after '--' for 'flag' tagged fields",
    )


def run_fill_command(config: HandoverConfig, args: argparse.Namespace) -> int:
    """Fill the target record and print it as sorted JSON."""
    record = instantiate_record(load_record_type(args.target))
    try:
        sources = build_sources(config, args)
        fill(record, sources)
    except DecodeError as error:
        print(f"decode_error={error}")
        return 1
    except HandoverError as error:
        print(f"error={error}")
        return 1
    print(json.dumps(record_to_payload(record), sort_keys=True, default=str))
    return 0


def build_sources(config: HandoverConfig, args: argparse.Namespace) -> list[Source]:
    """Build sources in increasing precedence: yaml, env, headers, flags."""
    sources: list[Source] = []
    if args.yaml_path:
        sources.append(yaml_source(args.yaml_path))
    if not args.no_env:
        sources.append(
            environment_source(
                prefix=config.env_prefix if args.env_prefix is None else args.env_prefix,
                separator=args.separator or config.list_separator,
            )
        )
    if args.header:
        sources.append(header_source([_split_header(row) for row in args.header]))
    flag_args = [row for row in args.flag_args if row != "--"]
    if flag_args:
        sources.append(argument_source(flag_args))
    return sources


def _split_header(row: str) -> tuple[str, str]:
    name, separator, value = row.partition(":")
    if not separator or not name.strip():
        raise HandoverError(f"Invalid header '{row}'. Use the form NAME:VALUE.")
    return name.strip(), value.strip()
