"""Shared fixtures for StockDash tests."""

from datetime import date, timedelta

import pytest

from stockdash.schemas.market import PriceBar
from stockdash.services.cache import MemoryCache
from stockdash.services.data_ingestion import (
    MarketDataService,
    MockMarketDataProvider,
    RateLimiter,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_bars(closes, start: date = date(2024, 1, 1)) -> list[PriceBar]:
    """Daily bars with the given closes; open/high/low follow the close."""
    return [
        PriceBar(
            date=start + timedelta(days=i),
            open=close,
            high=close + 1,
            low=max(close - 1, 0),
            close=close,
            volume=1_000_000,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    return MemoryCache(clock=clock)


@pytest.fixture
def market_service(memory_cache):
    """Market data service over a seeded mock provider with no rate limits."""
    return MarketDataService(
        provider=MockMarketDataProvider(seed=42),
        cache=memory_cache,
        rate_limiter=RateLimiter(),
        cache_ttl=300,
    )
