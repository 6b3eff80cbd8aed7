"""Public SDK surface for the layoff cleaner.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed option models.
"""

from __future__ import annotations

from core.config import CleanerConfig
from core.types import CleanLayoffRecord, CleaningOptions, CleaningResult, RawLayoffRecord
from core.verification import VerificationOptions, run_verification
from ingest.audit import run_audit
from ingest.pipeline import clean_dataset, clean_records

__all__ = [
    "CleanLayoffRecord",
    "CleanerConfig",
    "CleaningOptions",
    "CleaningResult",
    "RawLayoffRecord",
    "VerificationOptions",
    "clean_dataset",
    "clean_records",
    "run_audit",
    "run_verification",
]
