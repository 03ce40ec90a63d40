"""
Market Data Service Implementation

Fronts a market data provider with a TTL cache and a rate limiter.
Every fetch: cache lookup → rate-limit check → provider call → cache store.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from stockdash.core.config import settings
from stockdash.schemas.market import (
    HistoryRequest,
    PriceBar,
    PriceHistory,
    PredictionPoint,
    SentimentPoint,
    StockQuote,
)
from stockdash.services.cache import DataCache, get_data_cache, make_cache_key
from stockdash.services.data_ingestion.interface import (
    MarketDataProviderInterface,
    MarketDataServiceInterface,
)
from stockdash.services.data_ingestion.mock_provider import MockMarketDataProvider
from stockdash.services.data_ingestion.rate_limiter import RateLimiter, default_limits

logger = logging.getLogger(__name__)


def create_provider(name: Optional[str] = None) -> MarketDataProviderInterface:
    """Build the configured provider; unknown names fall back to mock data."""
    name = (name or settings.data_provider).lower()
    if name != "mock":
        logger.warning(f"Data provider '{name}' is not available, falling back to mock data")
    return MockMarketDataProvider(latency_seconds=settings.mock_latency_seconds)


class MarketDataService(MarketDataServiceInterface):
    """
    Market Data Service.

    Provider, cache and rate limiter are injected; defaults come from settings.
    """

    def __init__(
        self,
        provider: Optional[MarketDataProviderInterface] = None,
        cache: Optional[DataCache] = None,
        rate_limiter: Optional[RateLimiter] = None,
        cache_ttl: Optional[int] = None,
    ):
        self._provider = provider or create_provider()
        self._cache = cache
        self._rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter(default_limits())
        self._cache_ttl = cache_ttl if cache_ttl is not None else settings.cache_ttl_seconds

    @property
    def name(self) -> str:
        return "MarketDataService"

    @property
    def provider(self) -> MarketDataProviderInterface:
        return self._provider

    @property
    def cache(self) -> DataCache:
        # Resolved lazily so a Redis pool created at startup is picked up
        return self._cache if self._cache is not None else get_data_cache()

    async def _cached(
        self,
        endpoint: str,
        params: dict,
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Serve JSON-compatible data from cache, fetching on a miss."""
        key = make_cache_key(endpoint, {**params, "provider": self._provider.name})

        cached = await self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return cached

        logger.debug(f"Cache miss: {key}")
        self._rate_limiter.acquire(self._provider.name)
        data = await fetch()
        await self.cache.set(key, data, ttl=self._cache_ttl)
        return data

    async def execute(self, input_data: HistoryRequest) -> PriceHistory:
        """Fetch the date-ascending price history for a symbol."""
        symbol = input_data.symbol.upper().strip()
        time_range = input_data.time_range

        async def fetch():
            bars = await self._provider.get_history(symbol, time_range)
            return [bar.model_dump(mode="json") for bar in bars]

        data = await self._cached(
            "historical", {"symbol": symbol, "range": time_range.value}, fetch
        )

        return PriceHistory(
            symbol=symbol,
            time_range=time_range,
            source=self._provider.name,
            bars=[PriceBar(**bar) for bar in data],
        )

    async def get_quote(self, symbol: str) -> StockQuote:
        symbol = symbol.upper().strip()

        async def fetch():
            quote = await self._provider.get_quote(symbol)
            return quote.model_dump(mode="json")

        data = await self._cached("stock", {"symbol": symbol}, fetch)
        return StockQuote(**data)

    async def get_sentiment(self, symbol: str, days: int = 30) -> list[SentimentPoint]:
        symbol = symbol.upper().strip()

        async def fetch():
            points = await self._provider.get_sentiment(symbol, days)
            return [p.model_dump(mode="json") for p in points]

        data = await self._cached("sentiment", {"symbol": symbol, "days": days}, fetch)
        return [SentimentPoint(**p) for p in data]

    async def get_predictions(self, symbol: str) -> list[PredictionPoint]:
        symbol = symbol.upper().strip()

        async def fetch():
            points = await self._provider.get_predictions(symbol)
            return [p.model_dump(mode="json") for p in points]

        data = await self._cached("prediction", {"symbol": symbol}, fetch)
        return [PredictionPoint(**p) for p in data]

    async def get_status(self) -> dict[str, Any]:
        """Report provider, API key configuration and rate-limit budget."""
        api_keys = {
            "alphavantage": bool(settings.alpha_vantage_api_key),
            "finnhub": bool(settings.finnhub_api_key),
            "polygon": bool(settings.polygon_api_key),
        }
        rate_limits = {
            provider: {
                "calls": calls,
                "window_seconds": window,
                "remaining": self._rate_limiter.remaining(provider),
            }
            for provider, (calls, window) in self._rate_limiter.limits.items()
        }
        return {
            "provider": self._provider.name,
            "configured_provider": settings.data_provider,
            "is_mock": isinstance(self._provider, MockMarketDataProvider),
            "api_keys": api_keys,
            "rate_limits": rate_limits,
            "cache": type(self.cache).__name__,
            "cache_ttl_seconds": self._cache_ttl,
        }

    async def health_check(self) -> bool:
        """Healthy while the provider still has request budget."""
        return self._rate_limiter.can_make_request(self._provider.name)


# Singleton instance
_service_instance: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get or create market data service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = MarketDataService()
    return _service_instance
