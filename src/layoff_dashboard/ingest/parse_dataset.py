"""Parsing helpers for layoffs datasets.

`parse_dataset` reads a CSV or JSON file into a Dask DataFrame and renames
its columns onto the canonical schema (`company`, `headquarters`,
`laid_off`, `date`). Public layoffs trackers disagree on header names, so
headers are normalized and looked up in `COLUMN_ALIASES`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, cast

import pandas as pd
import dask.dataframe as dd

log = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("company", "laid_off", "date")
OPTIONAL_COLUMNS = ("headquarters",)

COLUMN_ALIASES: dict[str, str] = {
    "company": "company",
    "company_name": "company",
    "headquarters": "headquarters",
    "location": "headquarters",
    "location_hq": "headquarters",
    "hq": "headquarters",
    "laid_off": "laid_off",
    "laidoff": "laid_off",
    "total_laid_off": "laid_off",
    "laid_off_count": "laid_off",
    "date": "date",
    "date_announced": "date",
}

_NON_WORD_RE = re.compile(r"[^0-9a-z]+")


def normalize_header(name: str) -> str:
    """Lower-case a header and collapse punctuation to underscores.

    `"# Laid Off"` becomes `"laid_off"` and `"Location HQ"` becomes
    `"location_hq"`.
    """
    return _NON_WORD_RE.sub("_", str(name).strip().lower()).strip("_")


def canonical_columns(columns: list[str]) -> dict[str, str]:
    """Map source column names to canonical names.

    The first source column matching a canonical name wins.

    Raises:
        ValueError: if a required column has no match.
    """
    mapping: dict[str, str] = {}
    for col in columns:
        target = COLUMN_ALIASES.get(normalize_header(col))
        if target is not None and target not in mapping.values():
            mapping[col] = target

    missing = [c for c in REQUIRED_COLUMNS if c not in mapping.values()]
    if missing:
        raise ValueError(f"dataset is missing required columns: {', '.join(missing)}")
    return mapping


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    dd_mod = cast(Any, dd)
    if suffix == ".csv":
        return dd_mod.read_csv(str(path), dtype=str, blocksize="64MB")
    if suffix == ".json":
        pdf = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
        return dd_mod.from_pandas(pdf, npartitions=max(1, len(pdf) // 200_000))
    raise ValueError(f"unsupported dataset type {suffix!r} (expected .csv or .json)")


def parse_dataset(path: Path) -> Any:
    """Parse a layoffs dataset into a Dask DataFrame with canonical columns.

    Args:
        path: Path to a `.csv` or `.json` (list of objects) file.

    Returns:
        Dask DataFrame with `company`, `laid_off`, `date` and, when the
        source has one, `headquarters`. Values are left as read; see
        `clean_raw_ddf` for normalization.
    """
    ddf = _read_raw(path)
    mapping = canonical_columns(list(ddf.columns))
    ddf = ddf[list(mapping)].rename(columns=mapping)

    log.info("Parsed %s with %d partitions (columns: %s)", path, ddf.npartitions, ", ".join(ddf.columns))
    return ddf
