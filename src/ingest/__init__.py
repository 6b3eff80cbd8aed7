"""Ingestion layer.

This module reads raw layoff tables and runs the cleaning pipeline.
"""
