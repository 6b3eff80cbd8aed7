"""Unit tests for the cleaning pipeline runner."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from core.config import CleanerConfig
from core.constants import DATE_POLICY_SKIP
from core.errors import MalformedDateError
from core.types import CleaningOptions
from ingest.pipeline import CleaningPipelineRunner, clean_dataset, clean_records
from tests.fixture_paths import fixture_path
from tests.record_builders import raw_record


def test_clean_records_applies_stages_in_order() -> None:
    """In-memory cleaning should dedup, standardize, impute and filter."""
    raw_records = [
        raw_record(),
        raw_record(),
        raw_record(company=" Beyond Meat", industry=None, date="10/14/2022"),
        raw_record(company="Beyond Meat", industry="Food", date="2/28/2023"),
        raw_record(company="Quibi", total_laid_off=None, percentage_laid_off=None),
    ]

    cleaned = clean_records(raw_records, CleanerConfig())

    assert [record.company for record in cleaned] == ["Casper", "Beyond Meat", "Beyond Meat"]
    assert [record.industry for record in cleaned] == ["Consumer", "Food", "Food"]
    assert cleaned[0].date == date(2022, 5, 9)


def test_clean_records_is_deterministic() -> None:
    """Cleaning the same raw input twice should give the same output."""
    raw_records = [
        raw_record(company="Juul", industry="Consumer"),
        raw_record(company="Juul", industry=None, date="1/5/2023"),
        raw_record(company="Juul", industry="Retail", date="2/5/2023"),
    ]

    with pytest.warns(UserWarning):
        first = clean_records(raw_records, CleanerConfig())
    with pytest.warns(UserWarning):
        second = clean_records(raw_records, CleanerConfig())

    assert first == second


def test_clean_dataset_writes_output_and_stage_counts(tmp_path: Path) -> None:
    """File-based cleaning should report per-stage counts."""
    output_path = tmp_path / "clean.csv"
    options = CleaningOptions(
        source_uri=str(fixture_path("raw/layoffs_sample.csv")),
        output_uri=str(output_path),
    )

    result = clean_dataset(options, CleanerConfig())

    assert output_path.exists()
    assert result.input_count == 11
    assert result.output_count == 9
    assert [(row.stage, row.record_count) for row in result.stage_counts] == [
        ("loaded", 11),
        ("deduplicated", 10),
        ("standardized", 10),
        ("imputed", 10),
        ("filtered", 9),
        ("final_deduplicated", 9),
    ]


def test_clean_dataset_fails_without_writing_output(tmp_path: Path) -> None:
    """A malformed date under the fail policy should leave no output."""
    output_path = tmp_path / "clean.csv"
    options = CleaningOptions(
        source_uri=str(fixture_path("raw/malformed_dates.csv")),
        output_uri=str(output_path),
    )

    with pytest.raises(MalformedDateError):
        clean_dataset(options, CleanerConfig())

    assert output_path.exists() is False


def test_clean_dataset_skip_policy_reports_skipped_rows(tmp_path: Path) -> None:
    """The skip policy should drop malformed rows and list their ids."""
    options = CleaningOptions(
        source_uri=str(fixture_path("raw/malformed_dates.csv")),
        output_uri=str(tmp_path / "clean.jsonl"),
    )

    result = clean_dataset(options, CleanerConfig(date_policy=DATE_POLICY_SKIP))

    assert result.output_count == 1
    assert result.skipped_row_ids == (2, 3)


def test_runner_stage_counts_reset_between_clean_calls() -> None:
    """A reused runner should report only the latest run's stage counts."""
    runner = CleaningPipelineRunner(
        CleaningOptions(source_uri="<memory>", output_uri="<memory>"),
        CleanerConfig(),
    )

    runner.clean([raw_record(), raw_record()])
    runner.clean([raw_record()])

    assert [(row.stage, row.record_count) for row in runner._stage_counts] == [
        ("loaded", 1),
        ("deduplicated", 1),
        ("standardized", 1),
        ("imputed", 1),
        ("filtered", 1),
        ("final_deduplicated", 1),
    ]
