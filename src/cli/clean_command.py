"""Clean command wiring for the layoff cleaner CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import CleanerConfig
from core.types import CleaningOptions, CleaningResult
from ingest.pipeline import clean_dataset


def add_clean_command(subparsers: Any) -> None:
    """Register clean subcommand."""
    parser = subparsers.add_parser("clean", help="Clean a raw layoff table")
    parser.add_argument("source", help="Raw CSV/JSONL file or directory")
    parser.add_argument("--output", required=True, help="Cleaned CSV/JSONL destination")


def run_clean_command(config: CleanerConfig, args: argparse.Namespace) -> int:
    """Handle clean command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = CleaningOptions(source_uri=args.source, output_uri=args.output)
    print_cleaning_result(clean_dataset(options, config))
    return 0


def print_cleaning_result(result: CleaningResult) -> None:
    """Print a completed run summary."""
    stages = " ".join(f"{row.stage}={row.record_count}" for row in result.stage_counts)
    print(f"output={result.output_path}")
    print(f"input_count={result.input_count} output_count={result.output_count}")
    print(f"stages {stages}")
    if result.skipped_row_ids:
        print(f"skipped_rows={','.join(str(row_id) for row_id in result.skipped_row_ids)}")
