"""Cleaning utilities for layoff datasets.

Provides functions to normalize names, counts and dates partition-wise and to
validate cleaned rows against the `LayoffRecord` model.
"""
