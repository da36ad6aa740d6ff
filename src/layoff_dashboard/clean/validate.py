"""Validation utilities for cleaned layoff rows.

This module validates partition data against the Pydantic `LayoffRecord`
model after converting pandas missing markers and timestamps into native
Python values.
"""
from __future__ import annotations

import math
from typing import Any
import pandas as pd
from pydantic import ValidationError

from layoff_dashboard.models import LayoffRecord


def _native(value: Any) -> Any:
    """Convert NaN/NaT/NA to None and Timestamps to datetimes."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if value is pd.NaT or value is pd.NA:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    return value


def validate_partition(pdf: pd.DataFrame) -> tuple[list[LayoffRecord], int]:
    """Validate a pandas partition of cleaned rows using Pydantic.

    Args:
        pdf: Pandas DataFrame produced by `clean_partition`.

    Returns:
        A tuple of (list_of_validated_records, bad_count).
    """
    good: list[LayoffRecord] = []
    bad = 0

    for rec in pdf.to_dict(orient="records"):
        row = {k: _native(v) for k, v in rec.items()}
        try:
            good.append(LayoffRecord.model_validate(row))
        except ValidationError:
            bad += 1

    return good, bad
