"""Dataset loading for the dashboard.

Fetches a layoffs dataset (local path or URL, cached on disk), parses it into
a Dask DataFrame with canonical column names, and hands it to the cleaning
and validation stage.
"""
