"""Core constants used across layoff cleaner modules.

This module centralizes column names, labels, and file conventions.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

RECORD_FIELDS = (
    "company",
    "location",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
    "stage",
    "country",
    "funds_raised_millions",
)
INTEGER_FIELDS = ("total_laid_off", "funds_raised_millions")
NARROW_DUPLICATE_KEY = (
    "company",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
)
NULL_TOKEN = "NULL"
DEFAULT_DATE_FORMAT = "%m/%d/%Y"
DATE_POLICY_FAIL = "fail"
DATE_POLICY_SKIP = "skip"
SUPPORTED_DATE_POLICIES = (DATE_POLICY_FAIL, DATE_POLICY_SKIP)
CRYPTO_INDUSTRY_PREFIX = "Crypto"
CRYPTO_INDUSTRY_LABEL = "Crypto"
UNITED_STATES_PREFIX = "United States"
DEFAULT_INDUSTRY_OVERRIDES = {"Airbnb": "Travel"}
SUPPORTED_TABLE_EXTENSIONS = (".csv", ".jsonl")
SUPPORTED_RUN_SPEC_VERSION = 1
