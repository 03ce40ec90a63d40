"""
CONTRACT 1: Market Data

Input: HistoryRequest
Output: PriceHistory

Shapes consumed by the dashboard: daily price bars, quotes,
sentiment series, short-range predictions and company records.
"""

import datetime as dt
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class TimeRange(str, Enum):
    D1 = "1D"
    W1 = "1W"
    M1 = "1M"
    M3 = "3M"
    M6 = "6M"
    Y1 = "1Y"
    Y2 = "2Y"


# Calendar days covered by each range
TIME_RANGE_DAYS = {
    TimeRange.D1: 1,
    TimeRange.W1: 7,
    TimeRange.M1: 30,
    TimeRange.M3: 90,
    TimeRange.M6: 180,
    TimeRange.Y1: 365,
    TimeRange.Y2: 730,
}

DEFAULT_RANGE_DAYS = 30


def get_range_days(time_range: Union[TimeRange, str]) -> int:
    """Map a range label to calendar days; unknown labels get one month."""
    try:
        return TIME_RANGE_DAYS[TimeRange(time_range)]
    except ValueError:
        return DEFAULT_RANGE_DAYS


# =============================================================================
# PRICE DATA
# =============================================================================


class PriceBar(BaseModel):
    """Single daily candle."""

    date: dt.date
    open: float = Field(..., ge=0)
    high: float = Field(..., ge=0)
    low: float = Field(..., ge=0)
    close: float = Field(..., ge=0)
    volume: float = Field(..., ge=0)


class HistoryRequest(BaseModel):
    """
    Request for daily price history.
    Sent by: API
    Received by: Market Data Service
    """

    symbol: str = Field(..., min_length=1, max_length=20)
    time_range: TimeRange = TimeRange.M1


class PriceHistory(BaseModel):
    """Date-ascending price history for one symbol."""

    symbol: str
    time_range: TimeRange
    source: str
    bars: list[PriceBar]


class StockQuote(BaseModel):
    """Latest quote for a symbol."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int = Field(..., ge=0)
    market_cap: int = Field(..., ge=0)
    high: float
    low: float
    open: float
    previous_close: float


# =============================================================================
# SENTIMENT / PREDICTION
# =============================================================================


class SentimentPoint(BaseModel):
    """Daily news sentiment split."""

    date: dt.date
    positive: float
    neutral: float
    negative: float
    score: float = Field(..., description="positive - negative")


class PredictionPoint(BaseModel):
    """Predicted close for a future day."""

    date: dt.date
    predicted: float
    confidence: float = Field(..., ge=0, le=1)


# =============================================================================
# DIRECTORY
# =============================================================================


class Company(BaseModel):
    """Company directory entry."""

    symbol: str
    name: str
    sector: str
    exchange: Optional[str] = None
