"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Sequence

from stockdash.services.base import BaseService
from stockdash.schemas.market import PriceBar
from stockdash.schemas.indicators import (
    IndicatorParams,
    IndicatorRecord,
    IndicatorRequest,
    IndicatorResponse,
)


class IndicatorServiceInterface(BaseService[IndicatorRequest, IndicatorResponse]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorRequest
        - bars: date-ascending daily PriceBars
        - params: lookback periods (defaults 14/12/26/9/20/2)

    OUTPUT: IndicatorResponse
        - indicators: one IndicatorRecord per input bar
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: IndicatorRequest) -> IndicatorResponse:
        """Validate the bars and calculate all indicators."""
        pass

    @abstractmethod
    def calculate(
        self,
        bars: Sequence[PriceBar],
        params: IndicatorParams = None,
    ) -> list[IndicatorRecord]:
        """
        Calculate indicators for trusted, date-ascending bars.

        Args:
            bars: Daily price bars
            params: Lookback parameters (optional)

        Returns:
            Records aligned by position with the bars
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
