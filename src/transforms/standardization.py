"""Field standardization transforms.

This module rewrites company, industry, country, and date fields of
deduplicated records. Rules run in a fixed order: later rules assume the
company name has already been trimmed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable

from core.constants import (
    CRYPTO_INDUSTRY_LABEL,
    CRYPTO_INDUSTRY_PREFIX,
    DATE_POLICY_SKIP,
    DEFAULT_DATE_FORMAT,
    UNITED_STATES_PREFIX,
)
from core.errors import MalformedDateError
from core.logging_config import get_logger
from core.types import StagedRecord

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class StandardizationResult:
    """Standardized records plus rows dropped by the skip policy."""

    records: list[StagedRecord]
    skipped_row_ids: tuple[int, ...]


def trim_company(company: str | None) -> str | None:
    """Strip leading and trailing whitespace from a company name."""
    if company is None:
        return None
    return company.strip()


def canonicalize_industry(industry: str | None) -> str | None:
    """Collapse every ``Crypto*`` label into ``Crypto``.

    Matching is case-sensitive; other labels are returned unchanged.
    """
    if industry is not None and industry.startswith(CRYPTO_INDUSTRY_PREFIX):
        return CRYPTO_INDUSTRY_LABEL
    return industry


def clean_country(country: str | None) -> str | None:
    """Strip trailing dots from ``United States`` variants.

    Only dots at the end of the value are removed.
    """
    if country is not None and country.startswith(UNITED_STATES_PREFIX):
        return country.rstrip(".")
    return country


def parse_record_date(row_id: int, raw_value: str | date | None) -> date:
    """Parse a month/day/4-digit-year date value into a calendar date.

    Args:
        row_id: Working row id for error context.
        raw_value: Source date text; already-parsed dates pass through.

    Returns:
        Parsed calendar date.

    Raises:
        MalformedDateError: If the value is missing or does not conform.
    """
    if isinstance(raw_value, date):
        return raw_value
    if raw_value is None:
        raise MalformedDateError(row_id, raw_value, DEFAULT_DATE_FORMAT)
    try:
        return datetime.strptime(raw_value.strip(), DEFAULT_DATE_FORMAT).date()
    except ValueError as error:
        raise MalformedDateError(row_id, raw_value, DEFAULT_DATE_FORMAT) from error


def standardize_record(record: StagedRecord) -> StagedRecord:
    """Apply all field rules to one record in their fixed order."""
    company = trim_company(record.company)
    industry = canonicalize_industry(record.industry)
    country = clean_country(record.country)
    parsed_date = parse_record_date(record.row_id, record.date)
    return replace(record, company=company, industry=industry, country=country, date=parsed_date)


def standardize_records(records: Iterable[StagedRecord], date_policy: str) -> StandardizationResult:
    """Standardize every record under a malformed-date policy.

    Args:
        records: Deduplicated working records.
        date_policy: ``fail`` re-raises the first malformed date;
            ``skip`` drops the record and logs a warning.

    Returns:
        Standardized records and the ids of skipped rows.

    Raises:
        MalformedDateError: Under the ``fail`` policy.
    """
    standardized: list[StagedRecord] = []
    skipped: list[int] = []
    for record in records:
        try:
            standardized.append(standardize_record(record))
        except MalformedDateError as error:
            if date_policy != DATE_POLICY_SKIP:
                _LOGGER.error(
                    "malformed_date_rejected",
                    row_id=error.row_id,
                    raw_value=error.raw_value,
                    company=record.company,
                )
                raise
            _LOGGER.warning(
                "malformed_date_skipped",
                row_id=error.row_id,
                raw_value=error.raw_value,
                company=record.company,
            )
            skipped.append(record.row_id)
    return StandardizationResult(records=standardized, skipped_row_ids=tuple(skipped))
