"""
Market Data API Endpoints

Endpoints for price history, quotes, sentiment, predictions and company search.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from stockdash.schemas.market import (
    Company,
    HistoryRequest,
    PriceHistory,
    PredictionPoint,
    SentimentPoint,
    StockQuote,
    TimeRange,
)
from stockdash.services.base import RateLimitError
from stockdash.services.data_ingestion import get_market_data_service
from stockdash.services.data_ingestion.companies import (
    search_companies,
    get_popular_companies,
    get_companies_by_sector,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _rate_limited(e: RateLimitError) -> HTTPException:
    logger.warning(f"{e}")
    return HTTPException(status_code=429, detail=e.message)


@router.get("/history/{symbol}", response_model=PriceHistory)
async def get_history(
    symbol: str,
    range: TimeRange = Query(default=TimeRange.M1, description="History range"),
):
    """
    Get daily OHLCV bars for a symbol, oldest first.
    """
    service = get_market_data_service()
    try:
        return await service.execute(HistoryRequest(symbol=symbol, time_range=range))
    except RateLimitError as e:
        raise _rate_limited(e)


@router.get("/quote/{symbol}", response_model=StockQuote)
async def get_quote(symbol: str):
    """
    Get quick quote for a single symbol.
    """
    service = get_market_data_service()
    try:
        return await service.get_quote(symbol)
    except RateLimitError as e:
        raise _rate_limited(e)


@router.get("/sentiment/{symbol}", response_model=list[SentimentPoint])
async def get_sentiment(
    symbol: str,
    days: int = Query(default=30, ge=1, le=365),
):
    """
    Get daily news sentiment for the last `days` days.
    """
    service = get_market_data_service()
    try:
        return await service.get_sentiment(symbol, days)
    except RateLimitError as e:
        raise _rate_limited(e)


@router.get("/predictions/{symbol}", response_model=list[PredictionPoint])
async def get_predictions(symbol: str):
    """
    Get predicted closes for the next few days.
    """
    service = get_market_data_service()
    try:
        return await service.get_predictions(symbol)
    except RateLimitError as e:
        raise _rate_limited(e)


@router.get("/search", response_model=list[Company])
async def search(
    q: str = Query(..., min_length=1, description="Symbol or company name"),
    limit: int = Query(default=10, ge=1, le=50),
):
    """
    Search companies by symbol or name.
    """
    return search_companies(q, limit)


@router.get("/popular", response_model=list[Company])
async def popular(count: int = Query(default=8, ge=1, le=20)):
    """
    Get popular companies for default display.
    """
    return get_popular_companies(count)


@router.get("/sector/{sector}", response_model=list[Company])
async def by_sector(sector: str):
    """
    Get companies in a sector.
    """
    companies = get_companies_by_sector(sector)
    if not companies:
        raise HTTPException(status_code=404, detail=f"No companies found for sector {sector}")
    return companies


@router.get("/status")
async def get_status():
    """
    Get data provider status: active provider, API keys, rate-limit budget.
    """
    service = get_market_data_service()
    status = await service.get_status()
    status["healthy"] = await service.health_check()
    return status
