"""Unit tests for the output schema projection."""

from __future__ import annotations

from dataclasses import fields
from datetime import date

import pytest

from core.constants import RECORD_FIELDS
from core.errors import LayoffsTransformError
from tests.record_builders import staged_record
from transforms.finalization import finalize_records


def test_finalize_records_drops_helper_fields() -> None:
    """Clean records should expose only the record columns."""
    records = [staged_record(4, row_num=1, date=date(2022, 5, 9))]

    finalized = finalize_records(records)

    assert tuple(field.name for field in fields(finalized[0])) == RECORD_FIELDS
    assert finalized[0].date == date(2022, 5, 9)


def test_finalize_records_rejects_unparsed_dates() -> None:
    """Records that skipped standardization should not be finalized."""
    with pytest.raises(LayoffsTransformError):
        finalize_records([staged_record(1)])
