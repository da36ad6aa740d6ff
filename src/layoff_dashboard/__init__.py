"""layoff_dashboard package.

Contains modules for loading layoff-event datasets (local files or URLs),
cleaning & validating records, aggregating them into the two dashboard
summaries, and utilities for serving a Streamlit dashboard.

Architecture:
- Source file → Dask DataFrame → cleaned partitions → validated records
- Pydantic models validate records and aggregation outputs
- Aggregators are pure functions over a sequence of records
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
