"""Shared typed models.

This module defines immutable record models used by ingest, transforms,
store, and verification layers to keep stage interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from core.constants import DEFAULT_INDUSTRY_OVERRIDES

BusinessKey = tuple[object, ...]


@dataclass(frozen=True)
class RawLayoffRecord:
    """One layoff event exactly as read from the source table.

    Attributes:
        company: Company name, possibly padded with whitespace.
        location: Company location.
        industry: Industry label; ``""`` and ``None`` both mean missing.
        total_laid_off: Headcount laid off.
        percentage_laid_off: Fraction laid off, kept as a decimal string.
        date: Event date in source text form.
        stage: Company funding stage.
        country: Country name.
        funds_raised_millions: Funds raised in millions.
    """

    company: str | None
    location: str | None
    industry: str | None
    total_laid_off: int | None
    percentage_laid_off: str | None
    date: str | None
    stage: str | None
    country: str | None
    funds_raised_millions: int | None


@dataclass(frozen=True)
class StagedRecord:
    """Working-copy record owned by one pipeline run.

    Attributes:
        row_id: Stable synthetic identifier assigned on load.
        row_num: Rank within its duplicate group, 0 until ranked.
    """

    row_id: int
    company: str | None
    location: str | None
    industry: str | None
    total_laid_off: int | None
    percentage_laid_off: str | None
    date: str | date | None
    stage: str | None
    country: str | None
    funds_raised_millions: int | None
    row_num: int = 0

    def business_key(self) -> BusinessKey:
        """Return the full field tuple that defines a duplicate."""
        return (
            self.company,
            self.location,
            self.industry,
            self.total_laid_off,
            self.percentage_laid_off,
            self.date,
            self.stage,
            self.country,
            self.funds_raised_millions,
        )


@dataclass(frozen=True)
class CleanLayoffRecord:
    """Final cleaned layoff record without helper fields."""

    company: str | None
    location: str | None
    industry: str | None
    total_laid_off: int | None
    percentage_laid_off: str | None
    date: date
    stage: str | None
    country: str | None
    funds_raised_millions: int | None


@dataclass(frozen=True)
class CleaningOptions:
    """Clean command options.

    Attributes:
        source_uri: Input CSV/JSONL file or directory.
        output_uri: Destination CSV/JSONL file.
        industry_overrides: Audited company to industry fixes applied
            after imputation to rows that are still missing an industry.
    """

    source_uri: str
    output_uri: str
    industry_overrides: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_INDUSTRY_OVERRIDES)
    )


@dataclass(frozen=True)
class StageCount:
    """Row count observed after one pipeline stage."""

    stage: str
    record_count: int


@dataclass(frozen=True)
class CleaningResult:
    """Summary of a completed cleaning run.

    Attributes:
        output_path: Written destination file.
        input_count: Raw record count.
        output_count: Cleaned record count.
        stage_counts: Ordered per-stage row counts.
        skipped_row_ids: Rows dropped by the ``skip`` date policy.
    """

    output_path: str
    input_count: int
    output_count: int
    stage_counts: tuple[StageCount, ...]
    skipped_row_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class AuditReport:
    """Exploratory data-quality counts for a raw dataset."""

    source_uri: str
    record_count: int
    full_key_duplicates: int
    narrow_key_duplicates: int
    missing_industry: int
    non_informative: int
    malformed_dates: int
