"""Layoff cleaner CLI entry points.
This module exposes commands for cleaning, auditing, and verifying tables.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from cli.clean_command import add_clean_command, run_clean_command
from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from cli.verify_command import add_verify_command, run_verify_command
from core.config import CleanerConfig
from core.errors import LayoffsError
from ingest.audit import render_audit_report, run_audit


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="layoffclean",
        description="Clean and standardize corporate layoff tables",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_clean_command(subparsers)
    add_run_spec_command(subparsers)
    _add_audit_command(subparsers)
    add_verify_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the layoff cleaner CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = CleanerConfig.from_env()
        if args.command == "clean":
            return run_clean_command(config, args)
        if args.command == "run-spec":
            return run_run_spec_command(config, args)
        if args.command == "audit":
            return _run_audit_command(args)
        if args.command == "verify":
            return run_verify_command(args)
    except LayoffsError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_audit_command(args: argparse.Namespace) -> int:
    """Handle audit command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    print(render_audit_report(run_audit(args.source)))
    return 0


def _add_audit_command(subparsers: Any) -> None:
    """Register audit subcommand."""
    parser = subparsers.add_parser("audit", help="Report data-quality issues in a raw table")
    parser.add_argument("source", help="Raw CSV/JSONL file or directory")
