from __future__ import annotations

import pandas as pd
import dask.dataframe as dd
from layoff_dashboard.clean.transform import clean_raw_ddf


def _raw(**overrides: object) -> pd.DataFrame:
    row = {
        "company": "  Acme   Inc  ",
        "headquarters": " San  Francisco ",
        "laid_off": "120",
        "date": "2024-02-03",
    }
    row.update(overrides)
    return pd.DataFrame([row])


def test_cleaning_normalizes_names_counts_and_dates() -> None:
    ddf = dd.from_pandas(_raw(), npartitions=1)
    out = clean_raw_ddf(ddf).compute().reset_index(drop=True)
    assert out.loc[0, "company"] == "Acme Inc"
    assert out.loc[0, "headquarters"] == "San Francisco"
    assert out.loc[0, "laid_off"] == 120
    assert out.loc[0, "date"] == pd.Timestamp("2024-02-03")


def test_cleaning_marks_bad_values_missing() -> None:
    pdf = pd.concat(
        [
            _raw(company="   ", laid_off="lots"),
            _raw(laid_off="-4", date="yesterday-ish"),
        ],
        ignore_index=True,
    )
    out = clean_raw_ddf(dd.from_pandas(pdf, npartitions=1)).compute().reset_index(drop=True)
    assert pd.isna(out.loc[0, "company"])
    assert pd.isna(out.loc[0, "laid_off"])
    assert pd.isna(out.loc[1, "laid_off"])
    assert pd.isna(out.loc[1, "date"])


def test_cleaning_adds_missing_headquarters_column() -> None:
    pdf = _raw().drop(columns=["headquarters"])
    out = clean_raw_ddf(dd.from_pandas(pdf, npartitions=1)).compute()
    assert list(out.columns) == ["company", "headquarters", "laid_off", "date"]
    assert out["headquarters"].isna().all()
