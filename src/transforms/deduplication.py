"""Business-key deduplication transform.

This module ranks records inside groups of identical field tuples and
keeps the first-ranked record of each group. It is the first transform
stage after the loader.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from typing import Iterable, Sequence

from core.constants import RECORD_FIELDS
from core.types import StagedRecord


def assign_row_numbers(
    records: Iterable[StagedRecord],
    key_fields: Sequence[str] = RECORD_FIELDS,
) -> list[StagedRecord]:
    """Rank records within their duplicate group.

    Ranks start at 1 and follow input order, so the assignment is stable
    for a given ordering. ``None`` compares equal to ``None``.

    Args:
        records: Working records to rank.
        key_fields: Field names whose joint equality defines a duplicate.

    Returns:
        Records in input order with ``row_num`` populated.
    """
    group_counts: defaultdict[tuple[object, ...], int] = defaultdict(int)
    ranked_records: list[StagedRecord] = []
    for record in records:
        key = _build_key(record, key_fields)
        group_counts[key] += 1
        ranked_records.append(replace(record, row_num=group_counts[key]))
    return ranked_records


def remove_duplicate_rows(records: Iterable[StagedRecord]) -> list[StagedRecord]:
    """Keep only the first record of each full business-key group.

    Args:
        records: Working records to deduplicate.

    Returns:
        Ordered rank-1 records.
    """
    return [record for record in assign_row_numbers(records) if record.row_num == 1]


def find_duplicate_rows(
    records: Iterable[StagedRecord],
    key_fields: Sequence[str] = RECORD_FIELDS,
) -> list[StagedRecord]:
    """Return records ranked after the first one in their group.

    Args:
        records: Working records to inspect.
        key_fields: Field names whose joint equality defines a duplicate.

    Returns:
        Records with ``row_num`` greater than 1.
    """
    return [record for record in assign_row_numbers(records, key_fields) if record.row_num > 1]


def _build_key(record: StagedRecord, key_fields: Sequence[str]) -> tuple[object, ...]:
    if tuple(key_fields) == RECORD_FIELDS:
        return record.business_key()
    return tuple(getattr(record, name) for name in key_fields)
