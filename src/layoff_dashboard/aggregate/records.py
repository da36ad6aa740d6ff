"""Record access and value coercion shared by the aggregators.

Records arrive in whatever shape the caller has: validated `LayoffRecord`
models, dicts parsed from JSON (camelCase `laidOff` included) or simple
objects. Everything here tolerates malformed values and never raises for a
single bad record.
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd
from pandas.errors import OutOfBoundsDatetime
from pydantic import BaseModel

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "laid_off": ("laidOff",),
}


def read_field(record: Any, name: str) -> Any:
    """Return `name` (or one of its aliases) from a record, or None if absent."""
    keys = (name, *FIELD_ALIASES.get(name, ()))
    if isinstance(record, Mapping):
        for key in keys:
            if key in record:
                return record[key]
        return None
    for key in keys:
        if hasattr(record, key):
            return getattr(record, key)
    return None


def records_frame(records: Iterable[Any], fields: Sequence[str]) -> pd.DataFrame:
    """Build an object-typed DataFrame holding `fields` for each record.

    The input is iterated exactly once, so generators are fine.
    """
    rows = [[read_field(r, f) for f in fields] for r in records]
    return pd.DataFrame(rows, columns=list(fields), dtype=object)


def coerce_count(value: Any) -> int:
    """Return a layoff count as a non-negative int, or 0 when it is malformed.

    Accepted: finite, non-negative, integral numbers and strings holding one.
    Everything else (None, NaN, inf, negatives, fractions, bools, text)
    contributes 0.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return 0
    if isinstance(value, (int, np.integer)):
        return int(value) if value >= 0 else 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0 or not number.is_integer():
        return 0
    return int(number)


def coerce_company(value: Any) -> str | None:
    """Return the company name, or None when it is missing or blank."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def coerce_month(value: Any) -> tuple[int, int] | None:
    """Return the (year, month) of a date-like value, or None if it has none.

    Datetimes and dates are read directly, so any year they can hold is
    kept and timezone-aware values use their own wall-clock month. Strings
    are parsed with pandas, falling back to ISO format for years pandas
    cannot represent. Bare numbers are not dates.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, (bool, int, float, np.number)):
        return None
    if isinstance(value, (datetime, date)):
        return value.year, value.month
    try:
        ts = pd.Timestamp(value)
    except OutOfBoundsDatetime:
        if not isinstance(value, str):
            return None
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
        return parsed.year, parsed.month
    except (TypeError, ValueError):
        return None
    if pd.isna(ts):
        return None
    return ts.year, ts.month


def entries_to_frame(entries: Iterable[BaseModel]) -> pd.DataFrame:
    """Convert aggregation entries into a DataFrame for display or charting."""
    return pd.DataFrame([e.model_dump() for e in entries])
