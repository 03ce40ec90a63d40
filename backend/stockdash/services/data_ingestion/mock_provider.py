"""
Mock market data provider.

Serves generated data with optional simulated latency.
"""

import asyncio
import random
from typing import Optional

from stockdash.schemas.market import (
    PriceBar,
    PredictionPoint,
    SentimentPoint,
    StockQuote,
    TimeRange,
)
from stockdash.services.data_ingestion.interface import MarketDataProviderInterface
from stockdash.services.data_ingestion.mock_data import (
    generate_mock_history,
    generate_mock_quote,
    generate_mock_sentiment,
    generate_mock_predictions,
)


class MockMarketDataProvider(MarketDataProviderInterface):
    """Generated data; seed it for reproducible series."""

    def __init__(self, seed: Optional[int] = None, latency_seconds: float = 0.0):
        self._rng = random.Random(seed)
        self._latency = latency_seconds

    @property
    def name(self) -> str:
        return "mock"

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def get_quote(self, symbol: str) -> StockQuote:
        await self._simulate_latency()
        return generate_mock_quote(symbol, self._rng)

    async def get_history(self, symbol: str, time_range: TimeRange) -> list[PriceBar]:
        await self._simulate_latency()
        return generate_mock_history(time_range, self._rng)

    async def get_sentiment(self, symbol: str, days: int = 30) -> list[SentimentPoint]:
        await self._simulate_latency()
        return generate_mock_sentiment(days, self._rng)

    async def get_predictions(self, symbol: str) -> list[PredictionPoint]:
        await self._simulate_latency()
        return generate_mock_predictions(self._rng)
