"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings

from stockdash.schemas.indicators import MacdAlignment


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "StockDash Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Cache
    redis_url: Optional[str] = None  # In-memory cache when unset
    cache_ttl_seconds: int = 300

    # Market data provider
    data_provider: str = "mock"  # Only "mock" is implemented
    mock_latency_seconds: float = 0.0
    alpha_vantage_api_key: Optional[str] = None
    finnhub_api_key: Optional[str] = None
    polygon_api_key: Optional[str] = None

    # Rate Limits (requests per window)
    alpha_vantage_rate_limit: int = 5
    finnhub_rate_limit: int = 60
    polygon_rate_limit: int = 5
    rate_limit_window_seconds: float = 60.0

    # Indicator defaults
    rsi_period: int = 14
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9
    bollinger_period: int = 20
    bollinger_std_dev: float = 2.0
    macd_alignment: MacdAlignment = MacdAlignment.HEAD

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
