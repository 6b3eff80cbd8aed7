"""Cleaning orchestration for layoff tables.

This module coordinates source loading, the transform stages, a final
duplicate sweep, finalization, and the output write. The working dataset
is private to one runner; output is written only after every stage has
succeeded.
"""

from __future__ import annotations

from typing import Sequence

from core.config import CleanerConfig
from core.logging_config import get_logger
from core.types import (
    CleanLayoffRecord,
    CleaningOptions,
    CleaningResult,
    RawLayoffRecord,
    StageCount,
    StagedRecord,
)
from ingest.input_reader import read_source_records
from ingest.loader import load_working_copy
from store.table_writer import write_clean_records
from transforms.deduplication import remove_duplicate_rows
from transforms.finalization import finalize_records
from transforms.imputation import (
    apply_industry_overrides,
    filter_informative_rows,
    impute_industry,
    normalize_empty_industry,
)
from transforms.standardization import standardize_records

_LOGGER = get_logger(__name__)


class CleaningPipelineRunner:
    """Runner for one cleaning pipeline execution.

    Stage counts and skipped rows describe the most recent ``clean`` call.
    """

    def __init__(self, options: CleaningOptions, config: CleanerConfig) -> None:
        self._options = options
        self._config = config
        self._stage_counts: list[StageCount] = []
        self._skipped_row_ids: tuple[int, ...] = ()

    def run(self) -> CleaningResult:
        """Execute the pipeline and write the cleaned table."""
        raw_records = read_source_records(self._options.source_uri)
        clean_records = self.clean(raw_records)
        output_path = write_clean_records(self._options.output_uri, clean_records)
        result = CleaningResult(
            output_path=str(output_path),
            input_count=len(raw_records),
            output_count=len(clean_records),
            stage_counts=tuple(self._stage_counts),
            skipped_row_ids=self._skipped_row_ids,
        )
        _log_cleaning_completion(self._options, result)
        return result

    def clean(self, raw_records: Sequence[RawLayoffRecord]) -> list[CleanLayoffRecord]:
        """Run every in-memory stage over already-loaded raw records."""
        self._stage_counts = []
        self._skipped_row_ids = ()
        working = self._record_stage("loaded", load_working_copy(raw_records))
        working = self._record_stage("deduplicated", remove_duplicate_rows(working))
        working = self._standardize(working)
        working = self._record_stage("imputed", self._impute(working))
        working = self._record_stage("filtered", filter_informative_rows(working))
        # Standardization and imputation can make distinct raw rows identical.
        working = self._record_stage("final_deduplicated", remove_duplicate_rows(working))
        return finalize_records(working)

    def _standardize(self, records: list[StagedRecord]) -> list[StagedRecord]:
        result = standardize_records(records, date_policy=self._config.date_policy)
        self._skipped_row_ids = result.skipped_row_ids
        return self._record_stage("standardized", result.records)

    def _impute(self, records: list[StagedRecord]) -> list[StagedRecord]:
        normalized = normalize_empty_industry(records)
        imputed = impute_industry(normalized)
        return apply_industry_overrides(imputed, self._options.industry_overrides)

    def _record_stage(self, stage: str, records: list[StagedRecord]) -> list[StagedRecord]:
        self._stage_counts.append(StageCount(stage=stage, record_count=len(records)))
        _LOGGER.info("pipeline_stage_completed", stage=stage, record_count=len(records))
        return records


def clean_dataset(options: CleaningOptions, config: CleanerConfig) -> CleaningResult:
    """Run the cleaning pipeline from source file to destination file.

    Args:
        options: Source, destination, and override options.
        config: Runtime configuration.

    Returns:
        Summary of the completed run.

    Raises:
        MissingInputError: If the raw dataset cannot be obtained.
        MalformedDateError: If a date is malformed under the ``fail`` policy.
        LayoffsStoreError: If the cleaned table cannot be written.
    """
    runner = CleaningPipelineRunner(options, config)
    return runner.run()


def clean_records(
    raw_records: Sequence[RawLayoffRecord],
    config: CleanerConfig,
    options: CleaningOptions | None = None,
) -> list[CleanLayoffRecord]:
    """Clean in-memory raw records without touching the filesystem."""
    runner_options = options or CleaningOptions(source_uri="<memory>", output_uri="<memory>")
    return CleaningPipelineRunner(runner_options, config).clean(raw_records)


def _log_cleaning_completion(options: CleaningOptions, result: CleaningResult) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "cleaning_completed",
        source_uri=options.source_uri,
        output_path=result.output_path,
        input_count=result.input_count,
        output_count=result.output_count,
        skipped_row_count=len(result.skipped_row_ids),
    )
