"""
Cache module for StockDash.

Provides TTL caching for market data responses (Redis or in-memory).
"""

from stockdash.services.cache.cache import (
    DataCache,
    MemoryCache,
    RedisCache,
    make_cache_key,
    get_data_cache,
    init_redis,
    close_redis,
)

__all__ = [
    "DataCache",
    "MemoryCache",
    "RedisCache",
    "make_cache_key",
    "get_data_cache",
    "init_redis",
    "close_redis",
]
