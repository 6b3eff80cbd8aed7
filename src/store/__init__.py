"""Cleaned table persistence layer.

This module writes finalized layoff records to CSV or JSONL outputs.
"""
