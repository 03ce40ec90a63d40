"""
StockDash Schema Contracts

JSON contracts between the market data layer, the indicator engine and the API.
"""

from stockdash.schemas.market import (
    TimeRange,
    TIME_RANGE_DAYS,
    get_range_days,
    PriceBar,
    HistoryRequest,
    PriceHistory,
    StockQuote,
    SentimentPoint,
    PredictionPoint,
    Company,
)
from stockdash.schemas.indicators import (
    MacdAlignment,
    IndicatorParams,
    IndicatorRequest,
    IndicatorRecord,
    IndicatorResponse,
)

__all__ = [
    # Market
    "TimeRange",
    "TIME_RANGE_DAYS",
    "get_range_days",
    "PriceBar",
    "HistoryRequest",
    "PriceHistory",
    "StockQuote",
    "SentimentPoint",
    "PredictionPoint",
    "Company",
    # Indicators
    "MacdAlignment",
    "IndicatorParams",
    "IndicatorRequest",
    "IndicatorRecord",
    "IndicatorResponse",
]
