"""Dashboard aggregation helpers.

This package contains the two pure transforms behind the dashboard: a top-N
ranking of companies by total layoffs and a chronological per-month series.
Both accept pydantic `LayoffRecord` objects, mappings or plain objects, and
return fresh lists of pydantic entries on every call.
"""

from layoff_dashboard.aggregate.monthly import aggregate_monthly
from layoff_dashboard.aggregate.records import entries_to_frame
from layoff_dashboard.aggregate.top_companies import aggregate_top_companies

__all__ = ["aggregate_monthly", "aggregate_top_companies", "entries_to_frame"]
