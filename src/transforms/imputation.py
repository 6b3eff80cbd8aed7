"""Industry imputation and informative-row filtering.

This module fills missing industries from donor rows of the same
company and removes rows that carry no quantitative layoff signal.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping
import warnings

from core.errors import AmbiguousImputationWarning
from core.logging_config import get_logger
from core.types import StagedRecord

_LOGGER = get_logger(__name__)

IndustryIndex = dict[str, list[str]]


def normalize_empty_industry(records: Iterable[StagedRecord]) -> list[StagedRecord]:
    """Converge empty and whitespace-only industry values to ``None``."""
    return [
        replace(record, industry=None)
        if record.industry is not None and not record.industry.strip()
        else record
        for record in records
    ]


def build_industry_index(records: Iterable[StagedRecord]) -> IndustryIndex:
    """Map each company to its distinct known industries.

    Industries are listed in first-seen row order.

    Args:
        records: Records with empty industries already normalized.

    Returns:
        Company to ordered donor industries mapping.
    """
    index: IndustryIndex = {}
    for record in records:
        if record.industry is None or record.company is None:
            continue
        donors = index.setdefault(record.company, [])
        if record.industry not in donors:
            donors.append(record.industry)
    return index


def impute_industry(records: Iterable[StagedRecord]) -> list[StagedRecord]:
    """Fill missing industries from same-company donor records.

    The first donor industry in row order wins. When a company has more
    than one distinct donor industry an ``AmbiguousImputationWarning`` is
    issued and logged. Records without a donor keep ``None``.

    Args:
        records: Records with empty industries already normalized.

    Returns:
        Records in input order with industries filled where possible.
    """
    working = list(records)
    index = build_industry_index(working)
    _warn_ambiguous_donors(working, index)
    imputed: list[StagedRecord] = []
    filled_count = 0
    for record in working:
        donors = index.get(record.company)
        if record.industry is None and donors:
            imputed.append(replace(record, industry=donors[0]))
            filled_count += 1
        else:
            imputed.append(record)
    _LOGGER.info("industry_imputed", filled_count=filled_count)
    return imputed


def apply_industry_overrides(
    records: Iterable[StagedRecord],
    overrides: Mapping[str, str],
) -> list[StagedRecord]:
    """Apply audited company to industry fixes.

    Only rows still missing an industry after imputation are touched.

    Args:
        records: Imputed records.
        overrides: Company name to industry label.

    Returns:
        Records with overrides applied.
    """
    overridden: list[StagedRecord] = []
    for record in records:
        if record.industry is None and record.company in overrides:
            _LOGGER.info(
                "industry_override_applied",
                row_id=record.row_id,
                company=record.company,
                industry=overrides[record.company],
            )
            overridden.append(replace(record, industry=overrides[record.company]))
        else:
            overridden.append(record)
    return overridden


def filter_informative_rows(records: Iterable[StagedRecord]) -> list[StagedRecord]:
    """Drop records where both layoff measures are missing."""
    return [
        record
        for record in records
        if record.total_laid_off is not None or record.percentage_laid_off is not None
    ]


def _warn_ambiguous_donors(records: list[StagedRecord], index: IndustryIndex) -> None:
    """Warn once per company that needs a tie-break between donors."""
    needs_donor = {
        record.company
        for record in records
        if record.industry is None and record.company is not None
    }
    for company in sorted(needs_donor):
        donors = index.get(company, [])
        if len(donors) < 2:
            continue
        _LOGGER.warning(
            "ambiguous_industry_imputation",
            company=company,
            candidates=donors,
            chosen=donors[0],
        )
        warnings.warn(
            f"Company {company!r} has {len(donors)} donor industries {donors}; "
            f"using first seen {donors[0]!r}.",
            AmbiguousImputationWarning,
            stacklevel=3,
        )
