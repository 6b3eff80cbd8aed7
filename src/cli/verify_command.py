"""Verification command wiring for the layoff cleaner CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.verification import (
    VerificationOptions,
    render_verification_report,
    run_verification,
    save_verification_report,
)


def add_verify_command(subparsers: Any) -> None:
    """Register verify subcommand."""
    parser = subparsers.add_parser(
        "verify",
        help="Check a cleaned table against the output invariants",
    )
    parser.add_argument("cleaned_file", help="Cleaned CSV/JSONL file")
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop after the first failed check",
    )
    parser.add_argument(
        "--save-report",
        action="store_true",
        help="Write a JSON report next to the cleaned file",
    )


def run_verify_command(args: argparse.Namespace) -> int:
    """Execute verification workflow and print check report."""
    options = VerificationOptions(cleaned_path=args.cleaned_file, fail_fast=args.fail_fast)
    report = run_verification(options)
    print(render_verification_report(report))
    if args.save_report:
        print(f"report_path={save_verification_report(report)}")
    return 0 if report.failed_count == 0 else 1
