from __future__ import annotations

from pathlib import Path

import pytest

from layoff_dashboard.config import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAYOFFS_DATA_SOURCE", "data/layoffs.csv")
    s = get_settings()
    assert s.data_source == "data/layoffs.csv"
    assert s.top_n == 10
    assert s.data_cache_dir == Path("data/layoffs_cache")
    assert s.log_path == Path("logs/layoffs.log")


def test_argument_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAYOFFS_DATA_SOURCE", "data/layoffs.csv")
    monkeypatch.setenv("LAYOFFS_TOP_N", "5")
    s = get_settings(data_source="other.json")
    assert s.data_source == "other.json"
    assert s.top_n == 5


def test_missing_source_raises() -> None:
    with pytest.raises(RuntimeError, match="LAYOFFS_DATA_SOURCE"):
        get_settings()


@pytest.mark.parametrize("value", ["ten", "-1"])
def test_bad_top_n_raises(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("LAYOFFS_TOP_N", value)
    with pytest.raises(RuntimeError, match="LAYOFFS_TOP_N"):
        get_settings(data_source="data/layoffs.csv")
