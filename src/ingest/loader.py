"""Loader stage: build the pipeline-owned working copy."""

from __future__ import annotations

from typing import Sequence

from core.errors import MissingInputError
from core.types import RawLayoffRecord, StagedRecord


def load_working_copy(raw_records: Sequence[RawLayoffRecord] | None) -> list[StagedRecord]:
    """Copy raw records into a new working dataset.

    Each record receives a synthetic ``row_id`` in input order so later
    stages can reference rows after their fields have been rewritten.
    The raw sequence is never modified.

    Args:
        raw_records: Raw records supplied by the reader.

    Returns:
        Independent working records with ``row_num`` unset.

    Raises:
        MissingInputError: If no raw records were supplied.
    """
    if not raw_records:
        raise MissingInputError(
            "Cannot start cleaning: no raw records were supplied. "
            "Load a non-empty source table and retry."
        )
    return [
        StagedRecord(
            row_id=row_id,
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
        for row_id, record in enumerate(raw_records, 1)
    ]
