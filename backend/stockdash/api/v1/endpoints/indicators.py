"""
Indicator API Endpoints

Endpoints for technical indicator calculations.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from stockdash.schemas.market import HistoryRequest, TimeRange
from stockdash.schemas.indicators import (
    IndicatorRequest,
    IndicatorResponse,
    MacdAlignment,
)
from stockdash.services.base import RateLimitError, ValidationError
from stockdash.services.data_ingestion import get_market_data_service
from stockdash.services.indicators import get_indicator_service
from stockdash.services.indicators.service import default_params

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/compute",
    response_model=IndicatorResponse,
    response_model_exclude_none=True,
)
async def compute_indicators(request: IndicatorRequest):
    """
    Calculate indicators for caller-supplied bars.

    Returns one record per bar; fields without enough history are omitted.
    """
    service = get_indicator_service()
    try:
        return await service.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"message": e.message, **e.details})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/{symbol}",
    response_model=IndicatorResponse,
    response_model_exclude_none=True,
)
async def get_indicators(
    symbol: str,
    range: TimeRange = Query(default=TimeRange.M3, description="History range"),
    rsi_period: Optional[int] = Query(default=None, ge=1, le=200),
    macd_fast_period: Optional[int] = Query(default=None, ge=1, le=200),
    macd_slow_period: Optional[int] = Query(default=None, ge=1, le=200),
    macd_signal_period: Optional[int] = Query(default=None, ge=1, le=200),
    bollinger_period: Optional[int] = Query(default=None, ge=1, le=200),
    bollinger_std_dev: Optional[float] = Query(default=None, ge=0, le=10),
    macd_alignment: Optional[MacdAlignment] = Query(default=None),
):
    """
    Get RSI, MACD and Bollinger Bands for a symbol's price history.

    Parameters not given fall back to the configured defaults.
    """
    overrides = {
        "rsi_period": rsi_period,
        "macd_fast_period": macd_fast_period,
        "macd_slow_period": macd_slow_period,
        "macd_signal_period": macd_signal_period,
        "bollinger_period": bollinger_period,
        "bollinger_std_dev": bollinger_std_dev,
        "macd_alignment": macd_alignment,
    }
    params = default_params().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    data_service = get_market_data_service()
    try:
        history = await data_service.execute(HistoryRequest(symbol=symbol, time_range=range))
    except RateLimitError as e:
        raise HTTPException(status_code=429, detail=e.message)

    indicator_service = get_indicator_service()
    try:
        response = await indicator_service.execute(
            IndicatorRequest(symbol=history.symbol, bars=history.bars, params=params)
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"message": e.message, **e.details})
    except Exception as e:
        logger.error(f"Indicator calculation failed for {symbol}: {e}")
        raise HTTPException(status_code=500, detail=f"Indicator calculation failed: {e}")

    response.time_range = range
    return response
