"""CLI command for printing a record's descriptor table."""

from __future__ import annotations

import argparse
from typing import Any

from cli.record_loader import instantiate_record, load_record_type
from core.types import FieldKind
from decode.field_inspector import inspect_record


def add_inspect_command(subparsers: Any) -> None:
    """Register inspect subcommand."""
    parser = subparsers.add_parser(
        "inspect",
        help="Print field descriptors of a dataclass record",
    )
    parser.add_argument("target", help="Record class as module:ClassName")


def run_inspect_command(args: argparse.Namespace) -> int:
    """Print one tab-separated row per field: index, name, kind, tags."""
    record = instantiate_record(load_record_type(args.target))
    for descriptor in inspect_record(record).descriptors:
        tags = " ".join(f"{key}={value}" for key, value in sorted(descriptor.tags.items()))
        print(f"{descriptor.index}\t{descriptor.name}\t{describe_kind(descriptor.kind)}\t{tags or '-'}")
    return 0


def describe_kind(kind: FieldKind) -> str:
    """Render a kind with its width, semantic and element, e.g. ``pointer[int64]``."""
    if kind.tag in ("signed_int", "unsigned_int"):
        return kind.type_name
    if kind.tag == "record" and kind.semantic == "timestamp":
        return "timestamp"
    if kind.tag == "sequence" and kind.semantic == "bytes":
        return "bytes"
    if kind.element is not None:
        return f"{kind.tag}[{describe_kind(kind.element)}]"
    if kind.tag == "unsupported":
        return f"unsupported({kind.type_name})"
    return kind.tag
