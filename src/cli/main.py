"""npdio CLI entry points.
This module exposes commands for listing and reading FactPages record kinds.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any, Sequence

from core.config import NpdConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import NpdError
from ingest.client import NpdClient
from records.field import NpdField
from records.payload import record_to_json
from records.registry import supported_kinds


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="npdio", description="NPD FactPages ingestion CLI")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override NPDIO_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_kinds_command(subparsers)
    _add_read_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the npdio CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.log_level)
        if args.command == "kinds":
            return _run_kinds_command(client)
        if args.command == "read":
            return _run_read_command(client, args)
    except NpdError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(log_level: str | None) -> NpdClient:
    """Build SDK client with optional log-level override.

    Args:
        log_level: Optional override level.

    Returns:
        Configured SDK client.
    """
    config = NpdConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    return NpdClient(config)


def _run_kinds_command(client: NpdClient) -> int:
    """Handle kinds command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    for record_kind in client.kinds():
        print(
            f"{record_kind.name}\t"
            f"{record_kind.column_count}\t"
            f"{record_kind.default_source_uri(client.config)}"
        )
    return 0


def _run_read_command(client: NpdClient, args: argparse.Namespace) -> int:
    """Handle read command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    records = client.read(args.kind, args.source)
    if args.production_source:
        fields = [record for record in records if isinstance(record, NpdField)]
        if len(fields) != len(records):
            print("error: --production-source requires the field kind", file=sys.stderr)
            return 1
        records = list(client.attach_production(fields, args.production_source))
    if args.limit is not None:
        records = records[: args.limit]
    for record in records:
        print(record_to_json(record))
    return 0


def _add_kinds_command(subparsers: Any) -> None:
    """Register kinds command."""
    subparsers.add_parser("kinds", help="List supported record kinds")


def _add_read_command(subparsers: Any) -> None:
    """Register read command."""
    parser = subparsers.add_parser("read", help="Read one record kind as JSON lines")
    parser.add_argument("kind", choices=supported_kinds(), help="Record kind name")
    parser.add_argument("--source", help="URL, s3://bucket/key or local path override")
    parser.add_argument(
        "--production-source",
        help="Attach monthly production from this source (field kind only)",
    )
    parser.add_argument("--limit", type=_non_negative_int, help="Maximum records to print")


def _non_negative_int(raw_value: str) -> int:
    value = int(raw_value)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected >= 0, got {raw_value}")
    return value
