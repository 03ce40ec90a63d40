"""
Indicator Engine Service Implementation

Runs the indicator calculations for a bar sequence.
Pure Python/NumPy calculations, no I/O.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from stockdash.core.config import settings
from stockdash.schemas.market import PriceBar
from stockdash.schemas.indicators import (
    IndicatorParams,
    IndicatorRecord,
    IndicatorRequest,
    IndicatorResponse,
)
from stockdash.services.base import ValidationError
from stockdash.services.indicators.interface import IndicatorServiceInterface
from stockdash.services.indicators.calculations import compute_indicators

logger = logging.getLogger(__name__)


def default_params() -> IndicatorParams:
    """Indicator parameters from application settings."""
    return IndicatorParams(
        rsi_period=settings.rsi_period,
        macd_fast_period=settings.macd_fast_period,
        macd_slow_period=settings.macd_slow_period,
        macd_signal_period=settings.macd_signal_period,
        bollinger_period=settings.bollinger_period,
        bollinger_std_dev=settings.bollinger_std_dev,
        macd_alignment=settings.macd_alignment,
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Stateless: safe to share between concurrent requests.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def validate_input(self, input_data: IndicatorRequest) -> IndicatorRequest:
        """Reject bars whose dates are not strictly ascending."""
        if not input_data.validate_dates:
            return input_data

        bars = input_data.bars
        for i in range(1, len(bars)):
            if bars[i].date <= bars[i - 1].date:
                raise ValidationError(
                    self.name,
                    "Bars must be strictly ascending by date",
                    {
                        "index": i,
                        "previous": bars[i - 1].date.isoformat(),
                        "current": bars[i].date.isoformat(),
                    },
                )
        return input_data

    async def execute(self, input_data: IndicatorRequest) -> IndicatorResponse:
        """Validate the request and calculate indicators for its bars."""
        request = await self.validate_input(input_data)
        params = request.params or default_params()
        records = self.calculate(request.bars, params)

        logger.debug(
            f"Calculated indicators for {request.symbol or 'ad-hoc series'}: "
            f"{len(records)} bars"
        )

        return IndicatorResponse(
            symbol=request.symbol,
            computed_at=datetime.now(),
            params=params,
            indicators=records,
        )

    def calculate(
        self,
        bars: Sequence[PriceBar],
        params: Optional[IndicatorParams] = None,
    ) -> list[IndicatorRecord]:
        """Calculate indicators for trusted, date-ascending bars."""
        params = params or default_params()
        return compute_indicators(
            bars,
            rsi_period=params.rsi_period,
            fast_period=params.macd_fast_period,
            slow_period=params.macd_slow_period,
            signal_period=params.macd_signal_period,
            bollinger_period=params.bollinger_period,
            std_dev=params.bollinger_std_dev,
            macd_alignment=params.macd_alignment,
        )

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
