"""
Mock Data Generator

Generates realistic-looking mock market data for development and testing.
Pass a seeded random.Random for reproducible output.
"""

import random
from datetime import date, timedelta
from typing import Optional

from stockdash.schemas.market import (
    PriceBar,
    StockQuote,
    SentimentPoint,
    PredictionPoint,
    TimeRange,
    get_range_days,
)
from stockdash.services.data_ingestion.companies import get_company

DAILY_VOLATILITY = 0.02
PREDICTION_DAYS = 5


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def generate_base_price(rng: Optional[random.Random] = None) -> float:
    """Random starting price between 100 and 500."""
    return 100 + _rng(rng).random() * 400


def generate_mock_history(
    time_range: TimeRange,
    rng: Optional[random.Random] = None,
    end_date: Optional[date] = None,
) -> list[PriceBar]:
    """
    Generate daily bars covering the range, oldest first.

    A range of d days yields d + 1 bars (end date inclusive).
    """
    rng = _rng(rng)
    end_date = end_date or date.today()
    days = get_range_days(time_range)
    base_price = generate_base_price(rng)

    bars: list[PriceBar] = []
    for i in range(days, -1, -1):
        trend = (rng.random() - 0.5) * 0.001
        daily_change = (rng.random() - 0.5) * DAILY_VOLATILITY + trend

        prev_close = bars[-1].close if bars else base_price
        open_price = prev_close * (1 + (rng.random() - 0.5) * 0.01)
        close_price = open_price * (1 + daily_change)
        high_price = max(open_price, close_price) * (1 + rng.random() * 0.02)
        low_price = min(open_price, close_price) * (1 - rng.random() * 0.02)

        bars.append(
            PriceBar(
                date=end_date - timedelta(days=i),
                open=round(open_price, 2),
                high=round(high_price, 2),
                low=round(low_price, 2),
                close=round(close_price, 2),
                volume=rng.randint(500_000, 5_499_999),
            )
        )

    return bars


def generate_mock_quote(symbol: str, rng: Optional[random.Random] = None) -> StockQuote:
    """Generate a quote around a random base price."""
    rng = _rng(rng)
    symbol = symbol.upper()
    company = get_company(symbol)

    base_price = generate_base_price(rng)
    change = (rng.random() - 0.5) * 20
    change_percent = (change / base_price) * 100

    return StockQuote(
        symbol=symbol,
        name=company.name if company else f"{symbol} Company",
        price=round(base_price + change, 2),
        change=round(change, 2),
        change_percent=round(change_percent, 2),
        volume=rng.randint(1_000_000, 10_999_999),
        market_cap=rng.randint(100_000_000_000, 1_099_999_999_999),
        high=round(base_price + abs(change) + rng.random() * 10, 2),
        low=round(base_price - abs(change) - rng.random() * 10, 2),
        open=round(base_price + (rng.random() - 0.5) * 5, 2),
        previous_close=round(base_price, 2),
    )


def generate_mock_sentiment(
    days: int = 30,
    rng: Optional[random.Random] = None,
    end_date: Optional[date] = None,
) -> list[SentimentPoint]:
    """Generate days + 1 daily sentiment points, oldest first."""
    rng = _rng(rng)
    end_date = end_date or date.today()

    points = []
    for i in range(days, -1, -1):
        positive = rng.random() * 0.6 + 0.2
        negative = rng.random() * 0.4 + 0.1
        neutral = 1 - positive - negative

        points.append(
            SentimentPoint(
                date=end_date - timedelta(days=i),
                positive=round(positive, 3),
                neutral=round(neutral, 3),
                negative=round(negative, 3),
                score=round(positive - negative, 3),
            )
        )

    return points


def generate_mock_predictions(
    rng: Optional[random.Random] = None,
    start_date: Optional[date] = None,
) -> list[PredictionPoint]:
    """Generate predictions for the next trading days with decaying confidence."""
    rng = _rng(rng)
    start_date = start_date or date.today()
    base_price = generate_base_price(rng)

    points = []
    for i in range(1, PREDICTION_DAYS + 1):
        trend = (rng.random() - 0.5) * 0.02
        points.append(
            PredictionPoint(
                date=start_date + timedelta(days=i),
                predicted=round(base_price * (1 + trend * i), 2),
                confidence=round(max(0.6, 1 - (i * 0.1)), 2),
            )
        )

    return points
