"""Layoff cleaner exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class LayoffsError(Exception):
    """Base exception for all layoff cleaning failures."""


class LayoffsConfigError(LayoffsError):
    """Raised for invalid runtime configuration."""


class LayoffsIngestError(LayoffsError):
    """Raised for source parsing and schema failures."""


class MissingInputError(LayoffsIngestError):
    """Raised when the raw dataset cannot be obtained."""


class LayoffsTransformError(LayoffsError):
    """Raised for transform pipeline failures."""


class MalformedDateError(LayoffsTransformError):
    """Raised when a date value does not match the expected format."""

    def __init__(self, row_id: int, raw_value: str | None, date_format: str) -> None:
        self.row_id = row_id
        self.raw_value = raw_value
        self.date_format = date_format
        super().__init__(
            f"Malformed date at row {row_id}: expected format '{date_format}', "
            f"got {raw_value!r}. Fix the source value or set LAYOFFS_DATE_POLICY=skip."
        )


class LayoffsStoreError(LayoffsError):
    """Raised for cleaned dataset write failures."""


class LayoffsRunSpecError(LayoffsError):
    """Raised for invalid or unsupported run-spec configuration."""


class LayoffsVerificationError(LayoffsError):
    """Raised when a cleaned dataset violates an output invariant."""


class AmbiguousImputationWarning(UserWarning):
    """Warned when one company has several distinct donor industries."""
