"""
Sliding-window rate limiter for market data providers.

Each provider gets `calls` requests per `window` seconds. Providers
without a configured limit are never throttled.
"""

import time
from collections import deque
from typing import Callable, Deque, Dict, Optional, Tuple

from stockdash.core.config import settings
from stockdash.services.base import RateLimitError


class RateLimiter:
    """Per-provider sliding window of request timestamps."""

    def __init__(
        self,
        limits: Optional[Dict[str, Tuple[int, float]]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._limits = dict(limits or {})
        self._clock = clock
        self._requests: Dict[str, Deque[float]] = {}

    @property
    def limits(self) -> Dict[str, Tuple[int, float]]:
        return dict(self._limits)

    def _prune(self, provider: str) -> Deque[float]:
        """Drop timestamps that fell out of the provider's window."""
        requests = self._requests.setdefault(provider, deque())
        limit = self._limits.get(provider)
        if limit is None:
            return requests

        _, window = limit
        now = self._clock()
        while requests and now - requests[0] >= window:
            requests.popleft()
        return requests

    def can_make_request(self, provider: str) -> bool:
        limit = self._limits.get(provider)
        if limit is None:
            return True

        calls, _ = limit
        return len(self._prune(provider)) < calls

    def record_request(self, provider: str) -> None:
        self._requests.setdefault(provider, deque()).append(self._clock())

    def remaining(self, provider: str) -> Optional[int]:
        """Requests left in the current window, or None if unlimited."""
        limit = self._limits.get(provider)
        if limit is None:
            return None

        calls, _ = limit
        return max(0, calls - len(self._prune(provider)))

    def acquire(self, provider: str) -> None:
        """Record a request, raising RateLimitError if the window is full."""
        if not self.can_make_request(provider):
            calls, window = self._limits[provider]
            raise RateLimitError(
                "RateLimiter",
                f"Rate limit exceeded for {provider}",
                {"provider": provider, "calls": calls, "window_seconds": window},
            )
        self.record_request(provider)


def default_limits() -> Dict[str, Tuple[int, float]]:
    """Provider limits from application settings."""
    window = settings.rate_limit_window_seconds
    return {
        "alphavantage": (settings.alpha_vantage_rate_limit, window),
        "finnhub": (settings.finnhub_rate_limit, window),
        "polygon": (settings.polygon_rate_limit, window),
    }
