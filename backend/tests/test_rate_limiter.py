"""Tests for the sliding-window rate limiter."""

import pytest

from stockdash.services.base import RateLimitError
from stockdash.services.data_ingestion import RateLimiter
from stockdash.services.data_ingestion.rate_limiter import default_limits


class TestRateLimiter:
    """Tests for RateLimiter."""

    def test_allows_up_to_limit(self, clock):
        """`calls` requests fit in one window; the next is refused."""
        limiter = RateLimiter({"finnhub": (2, 60)}, clock=clock)

        limiter.acquire("finnhub")
        limiter.acquire("finnhub")

        assert not limiter.can_make_request("finnhub")
        with pytest.raises(RateLimitError) as exc_info:
            limiter.acquire("finnhub")
        assert exc_info.value.details["provider"] == "finnhub"

    def test_window_slides(self, clock):
        """Requests older than the window stop counting."""
        limiter = RateLimiter({"finnhub": (2, 60)}, clock=clock)
        limiter.acquire("finnhub")
        clock.advance(30)
        limiter.acquire("finnhub")

        clock.advance(29)
        assert not limiter.can_make_request("finnhub")

        clock.advance(1)
        assert limiter.can_make_request("finnhub")
        assert limiter.remaining("finnhub") == 1

    def test_remaining(self, clock):
        limiter = RateLimiter({"polygon": (5, 60)}, clock=clock)
        assert limiter.remaining("polygon") == 5

        limiter.record_request("polygon")
        limiter.record_request("polygon")

        assert limiter.remaining("polygon") == 3

    def test_unlimited_provider(self, clock):
        """Providers without a limit are never throttled."""
        limiter = RateLimiter({"finnhub": (1, 60)}, clock=clock)

        for _ in range(100):
            limiter.acquire("mock")

        assert limiter.can_make_request("mock")
        assert limiter.remaining("mock") is None

    def test_providers_are_independent(self, clock):
        limiter = RateLimiter({"a": (1, 60), "b": (1, 60)}, clock=clock)
        limiter.acquire("a")

        assert not limiter.can_make_request("a")
        assert limiter.can_make_request("b")

    def test_default_limits(self):
        """Free-tier limits per minute from settings."""
        limits = default_limits()

        assert limits["alphavantage"] == (5, 60.0)
        assert limits["finnhub"] == (60, 60.0)
        assert limits["polygon"] == (5, 60.0)
