"""Cleaned table persistence.

This module writes finalized records to CSV or JSONL destinations.
Files are written next to the destination and renamed into place so a
failed write never leaves partial output behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Sequence

import pandas as pd

from core.constants import NULL_TOKEN, RECORD_FIELDS, SUPPORTED_TABLE_EXTENSIONS
from core.errors import LayoffsStoreError
from core.types import CleanLayoffRecord
from store.record_payload import clean_record_to_payload


def write_clean_records(output_uri: str, records: Sequence[CleanLayoffRecord]) -> Path:
    """Write clean records to a CSV or JSONL file.

    Args:
        output_uri: Destination file path; suffix selects the format.
        records: Finalized records.

    Returns:
        Resolved destination path.

    Raises:
        LayoffsStoreError: If the suffix is unsupported or writing fails.
    """
    output_path = Path(output_uri).expanduser().resolve()
    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_TABLE_EXTENSIONS:
        raise LayoffsStoreError(
            f"Unsupported output file {output_path}: "
            f"expected one of {SUPPORTED_TABLE_EXTENSIONS}."
        )
    payloads = [clean_record_to_payload(record) for record in records]
    temp_path = output_path.with_name(f".{output_path.name}.tmp")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if suffix == ".csv":
            _write_csv(temp_path, payloads)
        else:
            _write_jsonl(temp_path, payloads)
        os.replace(temp_path, output_path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise LayoffsStoreError(
            f"Failed to write cleaned output at {output_path}: {error}. "
            "Check the destination directory and permissions."
        ) from error
    return output_path


def _write_csv(path: Path, payloads: list[dict[str, object]]) -> None:
    """Write payload rows with NULLs rendered as the NULL token."""
    frame = pd.DataFrame(payloads, columns=list(RECORD_FIELDS), dtype=object)
    frame.to_csv(path, index=False, na_rep=NULL_TOKEN)


def _write_jsonl(path: Path, payloads: list[dict[str, object]]) -> None:
    lines = [json.dumps(payload) for payload in payloads]
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
