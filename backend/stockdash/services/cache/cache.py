"""
Response cache for market data.

Values are JSON-compatible and expire after a per-entry TTL.
Redis is used when configured and reachable; otherwise an in-memory
cache keeps the same behaviour inside a single process.
"""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

import redis.asyncio as redis

from stockdash.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300

# Global Redis connection pool
_redis_pool: Optional[redis.Redis] = None


def make_cache_key(endpoint: str, params: Dict[str, Any]) -> str:
    """Build a key from an endpoint name and its parameters."""
    return f"{endpoint}_{json.dumps(params, sort_keys=True, default=str)}"


class DataCache(ABC):
    """Async key/value cache with per-entry TTL."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass


class MemoryCache(DataCache):
    """
    Timestamped in-process cache.

    Expired entries are dropped when read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float, float]] = {}

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, stored_at, ttl = entry
        if self._clock() - stored_at > ttl:
            del self._entries[key]
            return None

        return value

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        self._entries[key] = (value, self._clock(), ttl)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class RedisCache(DataCache):
    """
    Redis-backed cache.

    Keys:
    - cache:{key} → JSON value, expiring after ttl seconds

    Redis errors are treated as cache misses.
    """

    prefix = "cache:"

    def __init__(self, redis_client: redis.Redis):
        self._redis = redis_client

    async def get(self, key: str) -> Optional[Any]:
        try:
            value = await self._redis.get(self.prefix + key)
            return json.loads(value) if value else None
        except Exception as e:
            logger.debug(f"Redis get failed: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        try:
            await self._redis.set(self.prefix + key, json.dumps(value), ex=ttl)
        except Exception as e:
            logger.debug(f"Redis set failed: {e}")

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(self.prefix + key)
        except Exception as e:
            logger.debug(f"Redis delete failed: {e}")

    async def clear(self) -> None:
        try:
            keys = [k async for k in self._redis.scan_iter(match=self.prefix + "*")]
            if keys:
                await self._redis.delete(*keys)
        except Exception as e:
            logger.debug(f"Redis clear failed: {e}")


async def init_redis() -> Optional[redis.Redis]:
    """
    Initialize Redis connection pool.
    Called on application startup.
    """
    global _redis_pool

    if _redis_pool is not None:
        return _redis_pool

    if not settings.redis_url:
        logger.info("Redis not configured. Using in-memory cache.")
        return None

    try:
        _redis_pool = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
        # Test connection
        await _redis_pool.ping()
        logger.info(f"Redis connected: {settings.redis_url}")
        return _redis_pool
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Using in-memory fallback.")
        _redis_pool = None
        return None


async def close_redis() -> None:
    """Close Redis connection pool."""
    global _redis_pool
    if _redis_pool:
        await _redis_pool.aclose()
        _redis_pool = None
        logger.info("Redis connection closed")


# Process-wide fallback instance
_memory_cache: Optional[MemoryCache] = None


def get_data_cache() -> DataCache:
    """Redis cache when connected, otherwise the shared in-memory cache."""
    global _memory_cache
    if _redis_pool is not None:
        return RedisCache(_redis_pool)
    if _memory_cache is None:
        _memory_cache = MemoryCache()
    return _memory_cache
