"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads environment variables (including a check that a data source is set).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for dashboard configuration read from the environment.

    Attributes:
        data_source: Path or http(s) URL of the layoffs dataset.
        data_cache_dir: Local cache directory for downloaded datasets.
        top_n: Number of companies shown in the top-companies ranking.
        log_path: File that receives a copy of the log output.
    """
    data_source: str
    data_cache_dir: Path
    top_n: int
    log_path: Path



def get_settings(data_source: str | None = None) -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Args:
        data_source: Optional override for `LAYOFFS_DATA_SOURCE`.

    Raises:
        RuntimeError: if no data source is configured or `LAYOFFS_TOP_N`
            is not a non-negative integer.
    """
    source = (data_source or os.getenv("LAYOFFS_DATA_SOURCE", "")).strip()
    data_cache_dir = Path(os.getenv("LAYOFFS_CACHE_DIR", "data/layoffs_cache"))
    log_path = Path(os.getenv("LAYOFFS_LOG_PATH", "logs/layoffs.log"))
    raw_top_n = os.getenv("LAYOFFS_TOP_N", "10").strip()

    if not source:
        raise RuntimeError(
            "LAYOFFS_DATA_SOURCE is required. Set it in .env "
            "(example: 'data/layoffs.csv' or an https:// URL to a CSV file)."
        )

    try:
        top_n = int(raw_top_n)
    except ValueError as exc:
        raise RuntimeError(f"LAYOFFS_TOP_N must be an integer, got {raw_top_n!r}") from exc
    if top_n < 0:
        raise RuntimeError(f"LAYOFFS_TOP_N must be non-negative, got {top_n}")

    return Settings(
        data_source=source,
        data_cache_dir=data_cache_dir,
        top_n=top_n,
        log_path=log_path,
    )
