"""Unit tests for business-key deduplication."""

from __future__ import annotations

from core.constants import NARROW_DUPLICATE_KEY
from tests.record_builders import staged_record
from transforms.deduplication import (
    assign_row_numbers,
    find_duplicate_rows,
    remove_duplicate_rows,
)


def test_remove_duplicate_rows_keeps_one_identical_casper_row() -> None:
    """Two identical rows should collapse to the first one."""
    records = [staged_record(1), staged_record(2)]

    deduped = remove_duplicate_rows(records)

    assert [record.row_id for record in deduped] == [1]


def test_remove_duplicate_rows_is_idempotent() -> None:
    """Deduplicating already-deduplicated output should change nothing."""
    records = [
        staged_record(1),
        staged_record(2),
        staged_record(3, company="Shopify"),
        staged_record(4, company="Shopify"),
        staged_record(5, location="New York City"),
    ]

    once = remove_duplicate_rows(records)
    twice = remove_duplicate_rows(once)

    assert [record.row_id for record in once] == [1, 3, 5]
    assert twice == once


def test_assign_row_numbers_treats_null_as_equal() -> None:
    """Rows whose nullable fields are both NULL should share a group."""
    records = [
        staged_record(1, industry=None, total_laid_off=None, funds_raised_millions=None),
        staged_record(2, industry=None, total_laid_off=None, funds_raised_millions=None),
    ]

    ranked = assign_row_numbers(records)

    assert [record.row_num for record in ranked] == [1, 2]


def test_assign_row_numbers_follows_input_order_per_group() -> None:
    """Ranks should restart per group and follow input order."""
    records = [
        staged_record(1),
        staged_record(2, company="Shopify"),
        staged_record(3),
        staged_record(4),
    ]

    ranked = assign_row_numbers(records)

    assert [(record.row_id, record.row_num) for record in ranked] == [
        (1, 1),
        (2, 1),
        (3, 2),
        (4, 3),
    ]


def test_find_duplicate_rows_narrow_key_ignores_location_and_stage() -> None:
    """The narrow exploration key should flag rows differing only in location."""
    records = [staged_record(1), staged_record(2, location="Remote", stage="Unknown")]

    assert find_duplicate_rows(records) == []
    narrow = find_duplicate_rows(records, NARROW_DUPLICATE_KEY)
    assert [record.row_id for record in narrow] == [2]
