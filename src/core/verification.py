"""Verification workflow orchestration and report formatting."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from core.errors import LayoffsVerificationError
from core.verification_checks import build_checks, build_runtime
from core.verification_types import (
    VerificationCheckResult,
    VerificationOptions,
    VerificationReport,
    VerificationRuntime,
    VerificationStatus,
)

__all__ = [
    "VerificationCheckResult",
    "VerificationOptions",
    "VerificationReport",
    "run_verification",
    "render_verification_report",
    "save_verification_report",
]


def run_verification(options: VerificationOptions) -> VerificationReport:
    """Run invariant checks against a cleaned table."""
    runtime = build_runtime(options.cleaned_path)
    results = _run_checks(runtime, build_checks(), options.fail_fast)
    return VerificationReport(
        cleaned_path=str(runtime.cleaned_path),
        record_count=len(runtime.records),
        checks=tuple(results),
    )


def _run_checks(
    runtime: VerificationRuntime,
    checks: tuple[tuple[str, str, Callable[[VerificationRuntime], str]], ...],
    fail_fast: bool,
) -> list[VerificationCheckResult]:
    results: list[VerificationCheckResult] = []
    for check_id, title, check_fn in checks:
        status, details = _run_single_check(check_fn, runtime)
        results.append(
            VerificationCheckResult(check_id=check_id, title=title, status=status, details=details)
        )
        if status == "failed" and fail_fast:
            break
    return results


def _run_single_check(
    check_fn: Callable[[VerificationRuntime], str],
    runtime: VerificationRuntime,
) -> tuple[VerificationStatus, str]:
    try:
        return "passed", str(check_fn(runtime))
    except LayoffsVerificationError as error:
        return "failed", str(error)


def render_verification_report(report: VerificationReport) -> str:
    """Render report into stable multi-line text for CLI output."""
    lines = [f"cleaned_path={report.cleaned_path}", f"records={report.record_count}"]
    for row in report.checks:
        lines.append(f"[{row.status.upper()}] {row.check_id} {row.title} :: {row.details}")
    lines.append(f"passed={report.passed_count}")
    lines.append(f"failed={report.failed_count}")
    return "\n".join(lines)


def save_verification_report(report: VerificationReport) -> Path:
    """Persist report JSON next to the cleaned table."""
    cleaned_path = Path(report.cleaned_path)
    report_path = cleaned_path.with_name(f"{cleaned_path.stem}.verification.json")
    payload = {
        "cleaned_path": report.cleaned_path,
        "record_count": report.record_count,
        "checks": [
            {
                "check_id": row.check_id,
                "title": row.title,
                "status": row.status,
                "details": row.details,
            }
            for row in report.checks
        ],
    }
    report_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return report_path
