"""
CONTRACT 2: Indicator Engine

Input: IndicatorRequest (date-ascending PriceBar list)
Output: IndicatorResponse (one IndicatorRecord per bar)

Pure Python/NumPy. Records are positionally aligned with the input bars;
fields without enough lookback history are None.
"""

import datetime as dt
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from stockdash.schemas.market import PriceBar, TimeRange


# =============================================================================
# ENUMS
# =============================================================================


class MacdAlignment(str, Enum):
    """How the fast and slow EMA series are paired for the MACD line."""

    HEAD = "head"  # leading overlap of both EMA arrays
    TAIL = "tail"  # trailing (date-matched) overlap


# =============================================================================
# INPUT: IndicatorRequest
# =============================================================================


class IndicatorParams(BaseModel):
    """Lookback parameters, defaulting to the dashboard's standard set."""

    rsi_period: int = Field(default=14, ge=1)
    macd_fast_period: int = Field(default=12, ge=1)
    macd_slow_period: int = Field(default=26, ge=1)
    macd_signal_period: int = Field(default=9, ge=1)
    bollinger_period: int = Field(default=20, ge=1)
    bollinger_std_dev: float = Field(default=2.0, ge=0)
    macd_alignment: MacdAlignment = MacdAlignment.HEAD


class IndicatorRequest(BaseModel):
    """
    Request for indicator calculation.
    Sent by: API
    Received by: Indicator Service
    """

    symbol: Optional[str] = None
    bars: list[PriceBar]
    params: Optional[IndicatorParams] = Field(
        default=None,
        description="Lookback parameters; configured defaults when omitted",
    )
    validate_dates: bool = Field(
        default=True,
        description="Reject non-ascending or duplicate dates (on by default)",
    )


# =============================================================================
# OUTPUT
# =============================================================================


class IndicatorRecord(BaseModel):
    """Indicator values for one trading day."""

    date: dt.date
    rsi: Optional[float] = Field(default=None, ge=0, le=100)
    macd: Optional[float] = None
    signal: Optional[float] = None
    histogram: Optional[float] = None
    sma: Optional[float] = None
    upper_band: Optional[float] = None
    lower_band: Optional[float] = None


class IndicatorResponse(BaseModel):
    """
    Indicator series for a symbol.
    Returned by: Indicator Service
    Consumed by: chart layer
    """

    symbol: Optional[str] = None
    time_range: Optional[TimeRange] = None
    computed_at: dt.datetime
    params: IndicatorParams
    indicators: list[IndicatorRecord]

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "AAPL",
                "time_range": "1M",
                "computed_at": "2024-02-04T10:30:00",
                "params": {"rsi_period": 14, "macd_alignment": "head"},
                "indicators": [
                    {"date": "2024-01-05"},
                    {
                        "date": "2024-02-04",
                        "rsi": 61.2,
                        "macd": 1.84,
                        "signal": 1.52,
                        "histogram": 0.32,
                        "sma": 188.4,
                        "upper_band": 194.9,
                        "lower_band": 181.9,
                    },
                ],
            }
        }
