"""
Market Data Service

CONTRACT:
    Input:  HistoryRequest
    Output: PriceHistory

RESPONSIBILITIES:
    - Serve daily price history, quotes, sentiment and predictions
    - Cache responses with a TTL (Redis or in-memory)
    - Enforce per-provider rate limits
    - Company directory search

Mock provider only - no exchange connectivity.
"""

from stockdash.services.data_ingestion.interface import (
    MarketDataProviderInterface,
    MarketDataServiceInterface,
)
from stockdash.services.data_ingestion.mock_provider import MockMarketDataProvider
from stockdash.services.data_ingestion.rate_limiter import RateLimiter
from stockdash.services.data_ingestion.service import (
    MarketDataService,
    get_market_data_service,
)

__all__ = [
    "MarketDataProviderInterface",
    "MarketDataServiceInterface",
    "MockMarketDataProvider",
    "RateLimiter",
    "MarketDataService",
    "get_market_data_service",
]
