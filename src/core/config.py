"""Runtime configuration model for the layoff cleaner.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DATE_POLICY_FAIL, SUPPORTED_DATE_POLICIES
from core.errors import LayoffsConfigError


@dataclass(frozen=True)
class CleanerConfig:
    """Validated runtime configuration.

    Attributes:
        date_policy: ``fail`` aborts on the first malformed date,
            ``skip`` drops the offending record with a warning log.
    """

    date_policy: str = DATE_POLICY_FAIL

    @classmethod
    def from_env(cls) -> "CleanerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LayoffsConfigError: If environment values are invalid.
        """
        date_policy = _parse_date_policy(os.getenv("LAYOFFS_DATE_POLICY", DATE_POLICY_FAIL))
        return cls(date_policy=date_policy)


def _parse_date_policy(raw_value: str) -> str:
    """Parse the malformed-date policy environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized policy name.

    Raises:
        LayoffsConfigError: If value is not a supported policy.
    """
    policy = raw_value.strip().lower()
    if policy not in SUPPORTED_DATE_POLICIES:
        raise LayoffsConfigError(
            "Invalid LAYOFFS_DATE_POLICY value: "
            f"expected one of {SUPPORTED_DATE_POLICIES}, got '{raw_value}'. "
            "Set LAYOFFS_DATE_POLICY to 'fail' or 'skip'."
        )
    return policy
