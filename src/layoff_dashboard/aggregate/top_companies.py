"""Top companies by total layoffs."""
from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable
from typing import Any

from layoff_dashboard.aggregate.records import coerce_company, coerce_count, records_frame
from layoff_dashboard.models import AggregatedCompanyEntry, InvalidLimitError

log = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def _check_limit(limit: Any) -> None:
    if limit is None:
        return
    if isinstance(limit, bool) or not isinstance(limit, numbers.Integral):
        raise InvalidLimitError(f"limit must be a non-negative integer or None, got {limit!r}")
    if limit < 0:
        raise InvalidLimitError(f"limit must be non-negative, got {limit}")


def aggregate_top_companies(
    records: Iterable[Any],
    limit: int | None = DEFAULT_LIMIT,
    *,
    order_ties_by_name: bool = False,
) -> list[AggregatedCompanyEntry]:
    """Return the companies with the most layoffs, largest first.

    Counts are summed per company name; malformed counts contribute 0 and
    records without a company name are skipped. Ties keep the order in which
    the companies first appear in `records`.

    Args:
        records: Layoff records (models, mappings or objects).
        limit: Maximum number of entries; None returns every company.
        order_ties_by_name: Break ties by company name ascending instead.

    Returns:
        List of `AggregatedCompanyEntry` sorted by `laid_off` descending.

    Raises:
        InvalidLimitError: if `limit` is negative or not an integer.
    """
    _check_limit(limit)
    if limit == 0:
        return []

    frame = records_frame(records, ("company", "laid_off"))

    # plain int sums: counts are unbounded, int64 would overflow
    totals: dict[str, int] = {}
    skipped = 0
    for raw_company, laid_off in zip(frame["company"], frame["laid_off"]):
        company = coerce_company(raw_company)
        if company is None:
            skipped += 1
            continue
        totals[company] = totals.get(company, 0) + coerce_count(laid_off)

    if skipped:
        log.debug("Skipped %d records without a company name", skipped)

    # sorted() is stable, so ties keep first-appearance order
    if order_ties_by_name:
        ranked = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    else:
        ranked = sorted(totals.items(), key=lambda kv: -kv[1])

    if limit is not None:
        ranked = ranked[:limit]

    return [AggregatedCompanyEntry(company=company, laid_off=total) for company, total in ranked]
