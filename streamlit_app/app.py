from __future__ import annotations

import streamlit as st
import altair as alt

from layoff_dashboard.aggregate import aggregate_monthly, aggregate_top_companies, entries_to_frame
from layoff_dashboard.config import get_settings
from layoff_dashboard.ingest.load_records import load_layoff_records
from layoff_dashboard.models import LayoffRecord

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Layoffs Dashboard", layout="wide")
st.title("📉 Layoffs Dashboard")

try:
    settings = get_settings()
except RuntimeError as exc:
    st.error(str(exc))
    st.stop()

# =====================================================
# Helpers
# =====================================================
@st.cache_data(show_spinner="Loading layoff data...")
def load_records(source: str) -> list[LayoffRecord]:
    """Load and validate the dataset once per source.

    Args:
        source: Path or URL of the dataset.

    Returns:
        Validated layoff records.
    """
    return load_layoff_records(source, settings.data_cache_dir)


def bar_labels(chart: alt.Chart, field: str, **mark: object) -> alt.Chart:
    """Return a text layer writing `field` with thousands separators."""
    return chart.mark_text(fontSize=10, color="#333", **mark).encode(
        text=alt.Text(f"{field}:Q", format=",")
    )


try:
    records = load_records(settings.data_source)
except (OSError, ValueError) as exc:
    st.error(f"Unable to load layoff data: {exc}")
    st.stop()

# =====================================================
# SECTION 1 — TOP COMPANIES
# =====================================================
st.header(f"Top {settings.top_n} Companies by Layoffs")

df_top = entries_to_frame(aggregate_top_companies(records, limit=settings.top_n))

if df_top.empty:
    st.info("Loading chart...")
else:
    base = alt.Chart(df_top).encode(
        x=alt.X("laid_off:Q", title="Laid off"),
        y=alt.Y("company:N", sort=alt.SortField("laid_off", order="descending"), title=None),
        tooltip=["company:N", alt.Tooltip("laid_off:Q", format=",")],
    )
    chart_top = (
        base.mark_bar(color="#8884d8")
        + bar_labels(base, "laid_off", align="left", dx=3)
    ).properties(height=400)
    st.altair_chart(chart_top, width="stretch")

st.divider()

# =====================================================
# SECTION 2 — MONTHLY SERIES
# =====================================================
st.header("Monthly Layoffs")

df_monthly = entries_to_frame(aggregate_monthly(records))

if df_monthly.empty:
    st.info("Loading chart...")
else:
    first, last = df_monthly["month"].iloc[0], df_monthly["month"].iloc[-1]
    st.caption(f"{first} to {last}")
    base = alt.Chart(df_monthly).encode(
        x=alt.X("month:O", sort=None, title="Month"),
        y=alt.Y("total_layoffs:Q", title="Laid off"),
        tooltip=["month:O", alt.Tooltip("total_layoffs:Q", format=",")],
    )
    chart_monthly = (
        base.mark_bar(color="#8884d8")
        + bar_labels(base, "total_layoffs", baseline="bottom", dy=-3)
    ).properties(height=400)
    st.altair_chart(chart_monthly, width="stretch")

# =====================================================
# Footer
# =====================================================
st.caption(f"{len(records):,} layoff events loaded • Pandas • Dask • Streamlit")
