"""Run-spec CLI command wiring.

This module registers the run-spec subcommand and runs the cleaning
pipeline described by a YAML file.
"""

from __future__ import annotations

import argparse
from typing import Any

from cli.clean_command import print_cleaning_result
from core.config import CleanerConfig
from core.run_spec import load_run_spec
from ingest.pipeline import clean_dataset


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run a cleaning job described by a YAML run-spec",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file")


def run_run_spec_command(config: CleanerConfig, args: argparse.Namespace) -> int:
    """Handle run-spec command invocation."""
    run_spec = load_run_spec(args.spec_file)
    print_cleaning_result(clean_dataset(run_spec.to_options(), config))
    return 0
