"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorRequest (daily PriceBars)
    Output: IndicatorResponse (one IndicatorRecord per bar)

RESPONSIBILITIES:
    - RSI over a sliding simple average of gains/losses
    - MACD line, signal line and histogram from EMAs
    - Bollinger Bands (SMA +/- k population std)
    - Right-align every series onto the bar sequence

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stockdash.services.indicators.interface import IndicatorServiceInterface
from stockdash.services.indicators.service import IndicatorService, get_indicator_service
from stockdash.services.indicators.calculations import compute_indicators

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
    "compute_indicators",
]
