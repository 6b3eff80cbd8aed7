"""Invariant checks for cleaned layoff tables."""

from __future__ import annotations

from collections import Counter
from dataclasses import astuple
from datetime import date
from pathlib import Path
from typing import Callable

from core.constants import CRYPTO_INDUSTRY_LABEL, CRYPTO_INDUSTRY_PREFIX, RECORD_FIELDS
from core.errors import LayoffsVerificationError
from core.types import RawLayoffRecord
from core.verification_types import VerificationRuntime
from ingest.input_reader import read_source_columns, read_source_records

CheckCallable = Callable[[VerificationRuntime], str]
CheckRow = tuple[str, str, CheckCallable]

_MAX_REPORTED_ROWS = 5


def build_runtime(cleaned_path: str) -> VerificationRuntime:
    """Read a cleaned table into runtime state used by checks."""
    resolved = Path(cleaned_path).expanduser().resolve()
    return VerificationRuntime(
        cleaned_path=resolved,
        columns=tuple(read_source_columns(str(resolved))),
        records=tuple(read_source_records(str(resolved))),
    )


def build_checks() -> tuple[CheckRow, ...]:
    """Build ordered check list."""
    return (
        ("C001", "Schema Projection", check_schema),
        ("C002", "Unique Business Key", check_unique_business_key),
        ("C003", "Company Trimmed", check_company_trimmed),
        ("C004", "Industry Canonical", check_industry_canonical),
        ("C005", "Country Suffix", check_country_suffix),
        ("C006", "Calendar Dates", check_calendar_dates),
        ("C007", "Informative Rows", check_informative_rows),
    )


def check_schema(runtime: VerificationRuntime) -> str:
    """Verify the output holds exactly the record columns."""
    if runtime.columns != RECORD_FIELDS:
        extra = sorted(set(runtime.columns) - set(RECORD_FIELDS))
        raise LayoffsVerificationError(
            f"Unexpected output columns {list(runtime.columns)}; extra={extra}."
        )
    return f"columns={len(runtime.columns)}"


def check_unique_business_key(runtime: VerificationRuntime) -> str:
    """Verify no two rows share the full field tuple."""
    counts = Counter(astuple(record) for record in runtime.records)
    duplicated = [key for key, count in counts.items() if count > 1]
    if duplicated:
        raise LayoffsVerificationError(
            f"Found {len(duplicated)} duplicated rows, e.g. {duplicated[:_MAX_REPORTED_ROWS]}."
        )
    return f"unique_rows={len(counts)}"


def check_company_trimmed(runtime: VerificationRuntime) -> str:
    """Verify company names carry no surrounding whitespace."""
    _raise_for_rows(
        runtime,
        lambda record: record.company is not None and record.company != record.company.strip(),
        "company names with surrounding whitespace",
    )
    return "trimmed=true"


def check_industry_canonical(runtime: VerificationRuntime) -> str:
    """Verify industries are never empty and Crypto variants are collapsed."""
    _raise_for_rows(
        runtime,
        lambda record: record.industry is not None and not record.industry.strip(),
        "empty industry values",
    )
    _raise_for_rows(
        runtime,
        lambda record: record.industry is not None
        and record.industry.startswith(CRYPTO_INDUSTRY_PREFIX)
        and record.industry != CRYPTO_INDUSTRY_LABEL,
        "uncollapsed Crypto industry labels",
    )
    missing = sum(1 for record in runtime.records if record.industry is None)
    return f"null_industry={missing}"


def check_country_suffix(runtime: VerificationRuntime) -> str:
    """Verify no country ends with a dot."""
    _raise_for_rows(
        runtime,
        lambda record: record.country is not None and record.country.endswith("."),
        "country values with trailing dots",
    )
    return "trailing_dots=0"


def check_calendar_dates(runtime: VerificationRuntime) -> str:
    """Verify every date is an ISO calendar date."""
    _raise_for_rows(runtime, lambda record: not _is_iso_date(record.date), "invalid dates")
    return f"dated_rows={len(runtime.records)}"


def check_informative_rows(runtime: VerificationRuntime) -> str:
    """Verify every row has at least one layoff measure."""
    _raise_for_rows(
        runtime,
        lambda record: record.total_laid_off is None and record.percentage_laid_off is None,
        "rows without total_laid_off and percentage_laid_off",
    )
    return f"informative_rows={len(runtime.records)}"


def _raise_for_rows(
    runtime: VerificationRuntime,
    predicate: Callable[[RawLayoffRecord], bool],
    description: str,
) -> None:
    offending = [record for record in runtime.records if predicate(record)]
    if offending:
        sample = [record.company for record in offending[:_MAX_REPORTED_ROWS]]
        raise LayoffsVerificationError(
            f"Found {len(offending)} {description}; companies={sample}."
        )


def _is_iso_date(value: str | None) -> bool:
    if value is None:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
