"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import CleanerConfig
from core.errors import LayoffsConfigError


def test_from_env_defaults_to_fail_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to failing on malformed dates."""
    monkeypatch.delenv("LAYOFFS_DATE_POLICY", raising=False)

    config = CleanerConfig.from_env()

    assert config.date_policy == "fail"


def test_from_env_reads_skip_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept a case-insensitive skip policy."""
    monkeypatch.setenv("LAYOFFS_DATE_POLICY", " SKIP ")

    config = CleanerConfig.from_env()

    assert config.date_policy == "skip"


def test_from_env_raises_for_invalid_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown policies."""
    monkeypatch.setenv("LAYOFFS_DATE_POLICY", "coerce")

    with pytest.raises(LayoffsConfigError):
        CleanerConfig.from_env()

    assert os.getenv("LAYOFFS_DATE_POLICY") == "coerce"


def test_from_env_ignores_date_format_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """The raw date format is fixed and cannot be swapped through the environment."""
    monkeypatch.delenv("LAYOFFS_DATE_POLICY", raising=False)
    monkeypatch.setenv("LAYOFFS_DATE_FORMAT", "%Y")

    config = CleanerConfig.from_env()

    assert not hasattr(config, "date_format")
