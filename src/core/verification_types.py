"""Typed models for cleaned-output verification."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from core.types import RawLayoffRecord

VerificationStatus = Literal["passed", "failed"]


@dataclass(frozen=True)
class VerificationOptions:
    """Options controlling verification execution."""

    cleaned_path: str
    fail_fast: bool = False


@dataclass(frozen=True)
class VerificationCheckResult:
    """One verification check result row."""

    check_id: str
    title: str
    status: VerificationStatus
    details: str


@dataclass(frozen=True)
class VerificationReport:
    """Final verification report for one cleaned table."""

    cleaned_path: str
    record_count: int
    checks: tuple[VerificationCheckResult, ...]

    @property
    def failed_count(self) -> int:
        """Count failed checks in this report."""
        return sum(1 for check in self.checks if check.status == "failed")

    @property
    def passed_count(self) -> int:
        """Count passed checks in this report."""
        return sum(1 for check in self.checks if check.status == "passed")


@dataclass(frozen=True)
class VerificationRuntime:
    """Cleaned table contents shared by check functions."""

    cleaned_path: Path
    columns: tuple[str, ...]
    records: tuple[RawLayoffRecord, ...]
