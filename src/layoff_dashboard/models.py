"""Pydantic models used for record validation and aggregation outputs.

These models define the expected schema for cleaned layoff records and the
two summaries consumed by the dashboard and tests.
"""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class InvalidLimitError(ValueError):
    """Raised when a top-N limit is negative or not an integer."""


class LayoffRecord(BaseModel):
    """Schema for a single cleaned layoff event.

    Attributes:
        company: Company name (non-empty).
        headquarters: Optional headquarters location; not used by aggregation.
        laid_off: Number of people laid off, or None when the source left it blank.
        date: Date of the event.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    company: str = Field(..., min_length=1)
    headquarters: str | None = None
    laid_off: int | None = Field(None, ge=0, alias="laidOff")
    date: datetime

class AggregatedCompanyEntry(BaseModel):
    """Total layoffs for one company."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    company: str
    laid_off: int = Field(..., ge=0)

class AggregatedMonthEntry(BaseModel):
    """Total layoffs for one calendar month, labelled `YYYY-MM`."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    total_layoffs: int = Field(..., ge=0)
