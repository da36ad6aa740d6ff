"""Cleaning and normalization utilities.

This module contains transformations that are applied partition-wise using
Dask. The output is a Dask DataFrame whose schema is stable and suitable for
Pydantic validation against `LayoffRecord`.
"""
from __future__ import annotations

import pandas as pd
import logging
from typing import Any

log = logging.getLogger(__name__)


def _normalize_text(value: Any) -> str | None:
    """Collapse internal whitespace; blank or non-text values become None."""
    if not isinstance(value, str):
        return None
    text = " ".join(value.split())
    return text or None


def clean_partition(pdf: pd.DataFrame) -> pd.DataFrame:
    """Partition-level cleaning function applied via map_partitions.

    Args:
        pdf: Pandas DataFrame for the partition, with canonical column names.

    Returns:
        Cleaned Pandas DataFrame with `company`, `headquarters`, `laid_off`
        and `date` columns.
    """
    pdf = pdf.copy()

    # -----------------------------
    # Normalize names
    # -----------------------------
    pdf["company"] = pdf["company"].map(_normalize_text).astype(object)
    if "headquarters" not in pdf.columns:
        pdf["headquarters"] = None
    pdf["headquarters"] = pdf["headquarters"].map(_normalize_text).astype(object)

    # -----------------------------
    # Counts: numeric, negatives are unknown
    # -----------------------------
    laid_off = pd.to_numeric(pdf["laid_off"], errors="coerce").astype("float64")
    pdf["laid_off"] = laid_off.where(laid_off >= 0)

    # -----------------------------
    # Standardize date
    # -----------------------------
    pdf["date"] = pd.to_datetime(pdf["date"], errors="coerce", format="mixed")

    return pdf[["company", "headquarters", "laid_off", "date"]]


def clean_raw_ddf(ddf: Any) -> Any:
    """Clean a parsed layoffs dataset.

    Performs name normalization, count coercion and date parsing, and makes
    sure a `headquarters` column exists.

    Returns:
        Transformed Dask DataFrame with a stable schema for validation.
    """
    log.info("Starting clean_raw_ddf transformation")
    return ddf.map_partitions(clean_partition)
