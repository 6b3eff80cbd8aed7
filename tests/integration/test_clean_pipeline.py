"""Integration test for the end-to-end cleaning flow."""

from __future__ import annotations

from pathlib import Path

from core.config import CleanerConfig
from core.types import CleaningOptions
from core.verification import VerificationOptions, run_verification
from ingest.input_reader import read_source_records
from ingest.pipeline import clean_dataset, clean_records
from tests.fixture_paths import fixture_path
from tests.record_builders import raw_record


def test_clean_sample_table_satisfies_output_invariants(tmp_path: Path) -> None:
    """Cleaning the sample table should resolve every seeded issue."""
    output_path = tmp_path / "clean.csv"
    source_path = fixture_path("raw/layoffs_sample.csv")
    source_before = source_path.read_bytes()

    clean_dataset(
        CleaningOptions(source_uri=str(source_path), output_uri=str(output_path)),
        CleanerConfig(),
    )
    cleaned = read_source_records(str(output_path))
    records = {record.company: record for record in cleaned}
    report = run_verification(VerificationOptions(cleaned_path=str(output_path)))

    assert source_path.read_bytes() == source_before
    assert report.failed_count == 0
    assert len(cleaned) == 9
    assert "Quibi" not in records
    assert records["Included Health"].country == "United States"
    assert records["Coinbase"].industry == "Crypto"
    assert records["Gemini"].industry == "Crypto"
    assert records["Beyond Meat"].industry == "Food"
    assert records["Airbnb"].industry == "Travel"
    assert records["Bally's Interactive"].industry is None
    assert records["Bally's Interactive"].percentage_laid_off == "0.15"
    assert records["Casper"].date == "2022-05-09"


def test_clean_is_idempotent_across_runs(tmp_path: Path) -> None:
    """Two runs on the same raw input should produce identical files."""
    source_uri = str(fixture_path("raw_valid"))
    first = clean_dataset(
        CleaningOptions(source_uri=source_uri, output_uri=str(tmp_path / "first.jsonl")),
        CleanerConfig(),
    )
    second = clean_dataset(
        CleaningOptions(source_uri=source_uri, output_uri=str(tmp_path / "second.jsonl")),
        CleanerConfig(),
    )

    first_text = Path(first.output_path).read_text(encoding="utf-8")
    second_text = Path(second.output_path).read_text(encoding="utf-8")
    assert first_text == second_text
    assert first.output_count == 3


def test_clean_collapses_rows_made_identical_by_standardization() -> None:
    """Rows that only differ in formatting should leave a single record."""
    raw_records = [
        raw_record(),
        raw_record(company=" Casper "),
        raw_record(country="United States."),
        raw_record(date="05/09/2022"),
        raw_record(company="Coinbase", industry="Crypto Currency"),
        raw_record(company="Coinbase", industry="CryptoCurrency"),
    ]

    cleaned = clean_records(raw_records, CleanerConfig())

    assert len(cleaned) == 2
    assert len(set(cleaned)) == 2
    assert [record.company for record in cleaned] == ["Casper", "Coinbase"]


def test_cleaned_output_passes_verification_after_country_cleanup(tmp_path: Path) -> None:
    """Country cleanup duplicates should not reach the written table."""
    source_path = tmp_path / "raw.csv"
    source_path.write_text(
        "company,location,industry,total_laid_off,percentage_laid_off,date,stage,country,"
        "funds_raised_millions\n"
        "Casper,SF Bay Area,Consumer,150,20%,5/9/2022,Post-IPO,United States,500\n"
        "Casper,SF Bay Area,Consumer,150,20%,5/9/2022,Post-IPO,United States.,500\n",
        encoding="utf-8",
    )
    output_path = tmp_path / "clean.csv"

    result = clean_dataset(
        CleaningOptions(source_uri=str(source_path), output_uri=str(output_path)),
        CleanerConfig(),
    )
    report = run_verification(VerificationOptions(cleaned_path=str(output_path)))

    assert result.output_count == 1
    assert result.stage_counts[-1].stage == "final_deduplicated"
    assert report.failed_count == 0
