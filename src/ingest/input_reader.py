"""Source table readers for cleaning runs.

This module loads raw layoff rows from local CSV or JSONL files.
It normalizes inputs into typed raw records for the loader stage.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import pandas as pd

from core.constants import INTEGER_FIELDS, NULL_TOKEN, RECORD_FIELDS, SUPPORTED_TABLE_EXTENSIONS
from core.errors import LayoffsIngestError, MissingInputError
from core.types import RawLayoffRecord


def read_source_records(source_uri: str) -> list[RawLayoffRecord]:
    """Load raw layoff records from a local file or directory.

    Args:
        source_uri: CSV/JSONL file, or a directory containing them.

    Returns:
        Ordered list of raw records.

    Raises:
        MissingInputError: If the source is missing or holds no records.
        LayoffsIngestError: If a file has missing columns or invalid cells.
    """
    source_path = Path(source_uri).expanduser()
    if not source_path.exists():
        raise MissingInputError(
            f"Failed to read source at {source_path}: path does not exist. "
            "Provide an existing CSV/JSONL file or directory."
        )
    if source_path.is_file():
        records = _read_file_records(source_path)
    else:
        records = []
        for file_path in sorted(source_path.rglob("*")):
            if file_path.is_file() and _is_supported_file(file_path):
                records.extend(_read_file_records(file_path))
    if not records:
        raise MissingInputError(
            f"No layoff records found under {source_path}. "
            f"Supported extensions: {SUPPORTED_TABLE_EXTENSIONS}."
        )
    return records


def read_source_columns(source_uri: str) -> list[str]:
    """Return the column names declared by a single table file.

    Args:
        source_uri: CSV or JSONL file.

    Returns:
        Header columns for CSV, keys of the first object for JSONL.

    Raises:
        MissingInputError: If the file does not exist.
        LayoffsIngestError: If the file cannot be parsed.
    """
    file_path = Path(source_uri).expanduser()
    if not file_path.is_file():
        raise MissingInputError(
            f"Failed to read columns at {file_path}: file does not exist. "
            "Provide an existing CSV/JSONL file."
        )
    if file_path.suffix.lower() == ".csv":
        try:
            return [str(name) for name in pd.read_csv(file_path, nrows=0).columns]
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as error:
            raise LayoffsIngestError(
                f"Failed to parse CSV header at {file_path}: {error}. Fix the file and retry."
            ) from error
    for line_number, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), 1):
        if line.strip():
            return list(_parse_jsonl_line(file_path, line, line_number))
    return []


def _read_file_records(file_path: Path) -> list[RawLayoffRecord]:
    """Read raw records from a single file.

    Args:
        file_path: Path to CSV or JSONL file.

    Returns:
        Parsed raw records.

    Raises:
        LayoffsIngestError: If the extension is unsupported.
    """
    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        return _read_csv_records(file_path)
    if suffix == ".jsonl":
        return _read_jsonl_records(file_path)
    raise LayoffsIngestError(
        f"Unsupported source file {file_path}: expected one of {SUPPORTED_TABLE_EXTENSIONS}."
    )


def _read_csv_records(file_path: Path) -> list[RawLayoffRecord]:
    """Read CSV rows with every cell kept as raw text."""
    try:
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return []
    except (OSError, pd.errors.ParserError) as error:
        raise LayoffsIngestError(
            f"Failed to parse CSV source at {file_path}: {error}. Fix the file and retry."
        ) from error
    _validate_columns(file_path, list(frame.columns))
    records: list[RawLayoffRecord] = []
    for line_number, row in enumerate(frame.to_dict(orient="records"), 2):
        records.append(build_raw_record(row, f"{file_path}:{line_number}"))
    return records


def _read_jsonl_records(file_path: Path) -> list[RawLayoffRecord]:
    """Read one JSON object per line."""
    records: list[RawLayoffRecord] = []
    for line_number, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        payload = _parse_jsonl_line(file_path, line, line_number)
        _validate_columns(file_path, list(payload))
        records.append(build_raw_record(payload, f"{file_path}:{line_number}"))
    return records


def _parse_jsonl_line(file_path: Path, line: str, line_number: int) -> dict[str, Any]:
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise LayoffsIngestError(
            f"Failed to parse JSONL record at {file_path}:{line_number}: "
            f"{error.msg}. Fix the JSON syntax and retry."
        ) from error
    if not isinstance(payload, dict):
        raise LayoffsIngestError(
            f"Invalid JSONL record at {file_path}:{line_number}: expected a JSON object."
        )
    return payload


def _validate_columns(file_path: Path, columns: list[str]) -> None:
    missing = [name for name in RECORD_FIELDS if name not in columns]
    if missing:
        raise LayoffsIngestError(
            f"Source {file_path} is missing required columns: {', '.join(missing)}. "
            f"Expected columns: {', '.join(RECORD_FIELDS)}."
        )


def build_raw_record(row: Mapping[str, Any], location: str) -> RawLayoffRecord:
    """Build a typed raw record from one source row.

    Args:
        row: Column name to cell value mapping.
        location: ``file:line`` used in error messages.

    Returns:
        Raw record with NULL tokens mapped to ``None``.

    Raises:
        LayoffsIngestError: If an integer column holds a non-integer value.
    """
    values: dict[str, Any] = {}
    for name in RECORD_FIELDS:
        if name in INTEGER_FIELDS:
            values[name] = _parse_integer_cell(row.get(name), name, location)
        else:
            values[name] = _parse_text_cell(row.get(name))
    return RawLayoffRecord(**values)


def _parse_text_cell(value: Any) -> str | None:
    """Map NULL tokens to ``None``; empty strings are kept as-is."""
    if value is None:
        return None
    text = str(value)
    if text.strip().upper() == NULL_TOKEN:
        return None
    return text


def _parse_integer_cell(value: Any, name: str, location: str) -> int | None:
    """Parse a nullable non-negative integer cell."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise _invalid_integer(value, name, location)
    text = str(value).strip()
    if not text or text.upper() == NULL_TOKEN:
        return None
    try:
        number = float(text)
    except ValueError as error:
        raise _invalid_integer(value, name, location) from error
    if not number.is_integer() or number < 0:
        raise _invalid_integer(value, name, location)
    return int(number)


def _invalid_integer(value: Any, name: str, location: str) -> LayoffsIngestError:
    return LayoffsIngestError(
        f"Invalid value for '{name}' at {location}: expected a non-negative integer or NULL, "
        f"got {value!r}. Fix the source cell and retry."
    )


def _is_supported_file(file_path: Path) -> bool:
    """Return whether a local file extension is supported."""
    return file_path.suffix.lower() in SUPPORTED_TABLE_EXTENSIONS
