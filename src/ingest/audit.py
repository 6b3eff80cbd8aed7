"""Exploratory data-quality audit for raw layoff tables.

Counts the problems the cleaning pipeline resolves, without changing
anything, so a raw table can be inspected before it is cleaned.
"""

from __future__ import annotations

from core.constants import NARROW_DUPLICATE_KEY
from core.errors import MalformedDateError
from core.types import AuditReport, StagedRecord
from ingest.input_reader import read_source_records
from ingest.loader import load_working_copy
from transforms.deduplication import find_duplicate_rows
from transforms.imputation import filter_informative_rows
from transforms.standardization import parse_record_date


def run_audit(source_uri: str) -> AuditReport:
    """Read a raw table and count data-quality issues.

    Args:
        source_uri: CSV/JSONL file or directory.

    Returns:
        Audit counts for the source.

    Raises:
        MissingInputError: If the raw dataset cannot be obtained.
    """
    records = load_working_copy(read_source_records(source_uri))
    return AuditReport(
        source_uri=source_uri,
        record_count=len(records),
        full_key_duplicates=len(find_duplicate_rows(records)),
        narrow_key_duplicates=len(find_duplicate_rows(records, NARROW_DUPLICATE_KEY)),
        missing_industry=sum(1 for record in records if not (record.industry or "").strip()),
        non_informative=len(records) - len(filter_informative_rows(records)),
        malformed_dates=_count_malformed_dates(records),
    )


def render_audit_report(report: AuditReport) -> str:
    """Render report into stable multi-line text for CLI output."""
    return "\n".join(
        [
            f"source={report.source_uri}",
            f"records={report.record_count}",
            f"full_key_duplicates={report.full_key_duplicates}",
            f"narrow_key_duplicates={report.narrow_key_duplicates}",
            f"missing_industry={report.missing_industry}",
            f"non_informative={report.non_informative}",
            f"malformed_dates={report.malformed_dates}",
        ]
    )


def _count_malformed_dates(records: list[StagedRecord]) -> int:
    malformed = 0
    for record in records:
        try:
            parse_record_date(record.row_id, record.date)
        except MalformedDateError:
            malformed += 1
    return malformed
