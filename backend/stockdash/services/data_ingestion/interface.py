"""
Market Data Interfaces

Defines the provider contract and the market data service contract.
"""

from abc import ABC, abstractmethod
from typing import Any

from stockdash.services.base import BaseService
from stockdash.schemas.market import (
    HistoryRequest,
    PriceBar,
    PriceHistory,
    PredictionPoint,
    SentimentPoint,
    StockQuote,
    TimeRange,
)


class MarketDataProviderInterface(ABC):
    """
    Source of raw market data.

    Implementations return date-ascending series and upper-case symbols.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name, also used as the rate-limit bucket."""
        pass

    @abstractmethod
    async def get_quote(self, symbol: str) -> StockQuote:
        pass

    @abstractmethod
    async def get_history(self, symbol: str, time_range: TimeRange) -> list[PriceBar]:
        pass

    @abstractmethod
    async def get_sentiment(self, symbol: str, days: int = 30) -> list[SentimentPoint]:
        pass

    @abstractmethod
    async def get_predictions(self, symbol: str) -> list[PredictionPoint]:
        pass


class MarketDataServiceInterface(BaseService[HistoryRequest, PriceHistory]):
    """
    Market Data Service Contract.

    INPUT: HistoryRequest
        - symbol: ticker
        - time_range: 1D / 1W / 1M / 3M / 6M / 1Y / 2Y

    OUTPUT: PriceHistory
        - bars: date-ascending daily PriceBars
    """

    @property
    def name(self) -> str:
        return "MarketDataService"

    @abstractmethod
    async def execute(self, input_data: HistoryRequest) -> PriceHistory:
        """Fetch (or serve from cache) the price history."""
        pass

    @abstractmethod
    async def get_quote(self, symbol: str) -> StockQuote:
        pass

    @abstractmethod
    async def get_sentiment(self, symbol: str, days: int = 30) -> list[SentimentPoint]:
        pass

    @abstractmethod
    async def get_predictions(self, symbol: str) -> list[PredictionPoint]:
        pass

    @abstractmethod
    async def get_status(self) -> dict[str, Any]:
        """Provider, configured API keys and remaining rate-limit budget."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass
