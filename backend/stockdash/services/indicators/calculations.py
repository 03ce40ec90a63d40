"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the dashboard's indicators.
All math is deterministic.

Each calculation returns only the values it has enough history for, so a
series is shorter than its input. `compute_indicators` right-aligns every
series onto the tail of the bar sequence.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from stockdash.schemas.indicators import IndicatorRecord, MacdAlignment
from stockdash.schemas.market import PriceBar


def _empty() -> np.ndarray:
    return np.array([], dtype=float)


def _check_period(period: int, label: str = "period") -> None:
    if period < 1:
        raise ValueError(f"{label} must be >= 1, got {period}")


@dataclass
class MACDSeries:
    """MACD line, signal line and histogram (signal/histogram may be shorter)."""

    macd: np.ndarray
    signal: np.ndarray
    histogram: np.ndarray


@dataclass
class BollingerSeries:
    """Middle band (SMA) with upper and lower bands, all the same length."""

    sma: np.ndarray
    upper: np.ndarray
    lower: np.ndarray


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def ema(data: Union[Sequence[float], np.ndarray], period: int) -> np.ndarray:
    """
    Exponential Moving Average.

    Seeded with the simple average of the first `period` values.
    Returns len(data) - period + 1 values, or an empty array.
    """
    _check_period(period)
    data = np.asarray(data, dtype=float)
    if len(data) < period:
        return _empty()

    multiplier = 2 / (period + 1)
    result = np.empty(len(data) - period + 1)
    result[0] = np.sum(data[:period]) / period

    for i in range(period, len(data)):
        j = i - period + 1
        result[j] = data[i] * multiplier + result[j - 1] * (1 - multiplier)

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: Union[Sequence[float], np.ndarray], period: int = 14) -> np.ndarray:
    """
    Relative Strength Index over a sliding simple average of gains and losses.

    This is not Wilder's smoothing: each value only sees the last `period`
    deltas. A window without losses is exactly 100.
    Returns len(closes) - period values, or an empty array.
    """
    _check_period(period)
    closes = np.asarray(closes, dtype=float)
    if len(closes) < period + 1:
        return _empty()

    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    result = np.empty(len(deltas) - period + 1)

    for i in range(period - 1, len(deltas)):
        avg_gain = np.sum(gains[i - period + 1 : i + 1]) / period
        avg_loss = np.sum(losses[i - period + 1 : i + 1]) / period

        if avg_loss == 0:
            result[i - period + 1] = 100.0
        else:
            rs = avg_gain / avg_loss
            result[i - period + 1] = 100 - (100 / (1 + rs))

    return result


def macd(
    closes: Union[Sequence[float], np.ndarray],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    alignment: MacdAlignment = MacdAlignment.HEAD,
) -> MACDSeries:
    """
    MACD (Moving Average Convergence Divergence).

    The fast and slow EMAs have different lengths; only `min` of the two is
    used. With HEAD alignment both arrays contribute their leading values
    (the dashboard's historical behaviour), with TAIL alignment their trailing,
    date-matched values (the textbook definition).
    """
    _check_period(fast_period, "fast_period")
    _check_period(slow_period, "slow_period")
    _check_period(signal_period, "signal_period")
    closes = np.asarray(closes, dtype=float)
    if len(closes) < slow_period:
        return MACDSeries(_empty(), _empty(), _empty())

    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)
    overlap = min(len(fast_ema), len(slow_ema))

    if MacdAlignment(alignment) == MacdAlignment.TAIL:
        macd_line = fast_ema[len(fast_ema) - overlap :] - slow_ema[len(slow_ema) - overlap :]
    else:
        macd_line = fast_ema[:overlap] - slow_ema[:overlap]

    signal_line = ema(macd_line, signal_period)
    size = min(len(macd_line), len(signal_line))

    if MacdAlignment(alignment) == MacdAlignment.TAIL:
        histogram = macd_line[len(macd_line) - size :] - signal_line[:size]
    else:
        histogram = macd_line[:size] - signal_line[:size]

    return MACDSeries(macd_line, signal_line, histogram)


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: Union[Sequence[float], np.ndarray],
    period: int = 20,
    std_dev: float = 2.0,
) -> BollingerSeries:
    """
    Bollinger Bands over a sliding window.

    Uses the population standard deviation (divisor = period).
    Returns len(closes) - period + 1 values per band, or empty arrays.
    """
    _check_period(period)
    closes = np.asarray(closes, dtype=float)
    if len(closes) < period:
        return BollingerSeries(_empty(), _empty(), _empty())

    size = len(closes) - period + 1
    middle = np.empty(size)
    upper = np.empty(size)
    lower = np.empty(size)

    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1 : i + 1]
        avg = np.sum(window) / period
        variance = np.sum((window - avg) ** 2) / period
        std = math.sqrt(variance)

        j = i - period + 1
        middle[j] = avg
        upper[j] = avg + (std * std_dev)
        lower[j] = avg - (std * std_dev)

    return BollingerSeries(middle, upper, lower)


# =============================================================================
# MERGE
# =============================================================================


def compute_indicators(
    bars: Sequence[PriceBar],
    rsi_period: int = 14,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    bollinger_period: int = 20,
    std_dev: float = 2.0,
    macd_alignment: MacdAlignment = MacdAlignment.HEAD,
) -> list[IndicatorRecord]:
    """
    Compute RSI, MACD and Bollinger Bands and merge them per bar.

    Returns exactly one record per bar. Each series is right-aligned onto the
    bars; the signal line is right-aligned again inside the MACD series, so
    the first MACD days have no signal or histogram.
    Insufficient history leaves fields as None and never raises.
    """
    closes = np.array([bar.close for bar in bars], dtype=float)
    n = len(closes)

    rsi_values = rsi(closes, rsi_period)
    macd_series = macd(closes, fast_period, slow_period, signal_period, macd_alignment)
    bands = bollinger_bands(closes, bollinger_period, std_dev)

    rsi_offset = n - len(rsi_values)
    macd_offset = n - len(macd_series.macd)
    signal_offset = len(macd_series.macd) - len(macd_series.signal)
    bands_offset = n - len(bands.sma)

    records = []
    for i, bar in enumerate(bars):
        fields = {"date": bar.date}

        if i >= rsi_offset:
            fields["rsi"] = float(rsi_values[i - rsi_offset])

        if i >= macd_offset:
            macd_index = i - macd_offset
            fields["macd"] = float(macd_series.macd[macd_index])
            if macd_index >= signal_offset:
                signal_index = macd_index - signal_offset
                fields["signal"] = float(macd_series.signal[signal_index])
                fields["histogram"] = float(macd_series.histogram[signal_index])

        if i >= bands_offset:
            bands_index = i - bands_offset
            fields["sma"] = float(bands.sma[bands_index])
            fields["upper_band"] = float(bands.upper[bands_index])
            fields["lower_band"] = float(bands.lower[bands_index])

        records.append(IndicatorRecord(**fields))

    return records
