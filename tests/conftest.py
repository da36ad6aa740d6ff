"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

CSV_TEXT = """Company,Location HQ,# Laid Off,Date,Industry
Acme,  San   Francisco ,100,2023-01-15,Retail
Globex,New York,50,2023-01-20,Finance
  Acme  ,San Francisco,30,2023-02-01,Retail
Initech,Austin,,2023-02-10,Software
Umbrella,Raccoon City,20,not a date,Health
,Nowhere,999,2023-02-11,Other
Hooli,Palo Alto,-5,2022-12-31,Software
"""


@pytest.fixture
def layoffs_csv(tmp_path: Path) -> Path:
    path = tmp_path / "layoffs.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("LAYOFFS_DATA_SOURCE", "LAYOFFS_CACHE_DIR", "LAYOFFS_TOP_N", "LAYOFFS_LOG_PATH"):
        monkeypatch.delenv(var, raising=False)
