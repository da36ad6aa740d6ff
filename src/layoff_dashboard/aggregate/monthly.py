"""Layoffs per calendar month."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from layoff_dashboard.aggregate.records import coerce_count, coerce_month, records_frame
from layoff_dashboard.models import AggregatedMonthEntry

log = logging.getLogger(__name__)


def aggregate_monthly(records: Iterable[Any]) -> list[AggregatedMonthEntry]:
    """Return total layoffs per month, oldest month first.

    Records are bucketed by the calendar month of their `date`. Records whose
    date cannot be parsed are left out; malformed counts contribute 0.

    Args:
        records: Records exposing `date` and `laid_off` (or `laidOff`).

    Returns:
        List of `AggregatedMonthEntry` labelled `YYYY-MM`, sorted by month.
    """
    frame = records_frame(records, ("date", "laid_off"))

    totals: dict[tuple[int, int], int] = {}
    skipped = 0
    for raw_date, laid_off in zip(frame["date"], frame["laid_off"]):
        month = coerce_month(raw_date)
        if month is None:
            skipped += 1
            continue
        totals[month] = totals.get(month, 0) + coerce_count(laid_off)

    if skipped:
        log.debug("Skipped %d records with an unparseable date", skipped)

    return [
        AggregatedMonthEntry(month=f"{year:04d}-{month:02d}", total_layoffs=total)
        for (year, month), total in sorted(totals.items())
    ]
