"""Finalizer: project working records onto the output schema."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from core.errors import LayoffsTransformError
from core.types import CleanLayoffRecord, StagedRecord


def finalize_records(records: Iterable[StagedRecord]) -> list[CleanLayoffRecord]:
    """Drop the rank and synthetic id helper fields.

    Args:
        records: Fully standardized and filtered working records.

    Returns:
        Clean records in working order.

    Raises:
        LayoffsTransformError: If a record still has an unparsed date.
    """
    finalized: list[CleanLayoffRecord] = []
    for record in records:
        if not isinstance(record.date, date):
            raise LayoffsTransformError(
                f"Cannot finalize row {record.row_id}: date {record.date!r} was not parsed. "
                "Run standardization before finalizing."
            )
        finalized.append(
            CleanLayoffRecord(
                company=record.company,
                location=record.location,
                industry=record.industry,
                total_laid_off=record.total_laid_off,
                percentage_laid_off=record.percentage_laid_off,
                date=record.date,
                stage=record.stage,
                country=record.country,
                funds_raised_millions=record.funds_raised_millions,
            )
        )
    return finalized
