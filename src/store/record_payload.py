"""Shared serialization for clean layoff records.

This module centralizes CleanLayoffRecord payload conversion.
It is reused by the table writer and by verification read-back.
"""

from __future__ import annotations

from core.constants import RECORD_FIELDS
from core.types import CleanLayoffRecord


def clean_record_to_payload(record: CleanLayoffRecord) -> dict[str, object]:
    """Serialize a clean record into a JSON-safe payload.

    Args:
        record: Clean record instance.

    Returns:
        Field name to value mapping in output column order, with the
        date rendered as ISO-8601 text.
    """
    payload: dict[str, object] = {}
    for name in RECORD_FIELDS:
        value = getattr(record, name)
        payload[name] = value.isoformat() if name == "date" else value
    return payload
