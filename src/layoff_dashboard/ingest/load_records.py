"""Load a layoffs dataset into validated `LayoffRecord` objects.

Module notes:
- Remote sources are downloaded once and cached on disk.
- Each Dask partition is validated independently; invalid rows are counted
  and logged rather than raised.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

from dask import delayed, compute  # type: ignore[attr-defined]

from layoff_dashboard.clean.transform import clean_raw_ddf
from layoff_dashboard.clean.validate import validate_partition
from layoff_dashboard.ingest.fetch_dataset import download_dataset, is_remote
from layoff_dashboard.ingest.parse_dataset import parse_dataset
from layoff_dashboard.models import LayoffRecord

log = logging.getLogger(__name__)


def resolve_source(source: str | Path, cache_dir: Path) -> Path:
    """Return a local path for `source`, downloading it first when it is a URL."""
    if isinstance(source, str) and is_remote(source):
        return download_dataset(source, cache_dir)
    return Path(source)


def validate_ddf(ddf: Any) -> tuple[list[LayoffRecord], int]:
    """Validate every partition of a cleaned Dask DataFrame.

    Uses `to_delayed()` so each partition is validated as a pandas frame.

    Returns:
        Tuple of (records in partition order, total invalid rows).
    """
    delayed_parts = ddf.to_delayed()
    tasks = [delayed(validate_partition)(part) for part in delayed_parts]

    # `compute` is untyped in our environment; cast to Any before calling
    results = cast(Any, compute)(*tasks)

    records: list[LayoffRecord] = []
    bad_total = 0
    for good, bad in results:
        records.extend(good)
        bad_total += bad
    return records, bad_total


def load_layoff_records(source: str | Path, cache_dir: Path) -> list[LayoffRecord]:
    """Fetch (if remote), parse, clean and validate a layoffs dataset.

    Args:
        source: Local file path or http(s) URL of a CSV/JSON dataset.
        cache_dir: Directory used to cache remote downloads.

    Returns:
        Validated records, in file order.
    """
    path = resolve_source(source, cache_dir)
    log.info("Loading layoff records from %s", path)

    ddf = clean_raw_ddf(parse_dataset(path))
    records, bad = validate_ddf(ddf)

    if bad:
        log.warning("Dropped %d rows that failed validation", bad)
    log.info("Load complete: good=%d bad=%d", len(records), bad)
    return records
