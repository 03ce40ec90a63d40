"""Tests for the HTTP API."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from stockdash.main import app
from stockdash.schemas.indicators import MacdAlignment
from stockdash.services.cache import MemoryCache
from stockdash.services.data_ingestion import (
    MarketDataService,
    MockMarketDataProvider,
    RateLimiter,
)
from stockdash.services.data_ingestion import service as market_service_module
from stockdash.services.indicators import service as indicator_service_module


def bar_payload(closes, start=date(2024, 1, 1)):
    return [
        {
            "date": (start + timedelta(days=i)).isoformat(),
            "open": c,
            "high": c + 1,
            "low": c - 1,
            "close": c,
            "volume": 1000,
        }
        for i, c in enumerate(closes)
    ]


@pytest.fixture
def client(monkeypatch):
    """Client whose market data service uses a fresh seeded mock provider."""
    service = MarketDataService(
        provider=MockMarketDataProvider(seed=7),
        cache=MemoryCache(),
        rate_limiter=RateLimiter(),
    )
    monkeypatch.setattr(market_service_module, "_service_instance", service)
    return TestClient(app)


class TestHealth:
    """Tests for service endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestIndicatorEndpoints:
    """Tests for /api/v1/indicators."""

    def test_compute_alternating_series(self, client):
        """Absent fields are omitted; RSI is 50 for alternating closes."""
        closes = [100.0 if i % 2 == 0 else 90.0 for i in range(30)]
        response = client.post("/api/v1/indicators/compute", json={"bars": bar_payload(closes)})

        assert response.status_code == 200
        records = response.json()["indicators"]
        assert len(records) == 30
        assert records[0] == {"date": "2024-01-01"}
        assert records[14]["rsi"] == 50.0
        assert "macd" not in records[24]
        assert "macd" in records[25]
        assert "signal" not in records[25]

    def test_compute_with_params(self, client):
        response = client.post(
            "/api/v1/indicators/compute",
            json={
                "bars": bar_payload([float(i) for i in range(1, 41)]),
                "params": {"macd_alignment": "tail"},
            },
        )

        body = response.json()
        assert body["params"]["macd_alignment"] == "tail"
        assert body["indicators"][25]["macd"] == pytest.approx(7.0)

    def test_compute_uses_configured_defaults(self, client, monkeypatch):
        """A request without params follows the configured indicator settings."""
        monkeypatch.setattr(indicator_service_module.settings, "macd_alignment", MacdAlignment.TAIL)
        monkeypatch.setattr(indicator_service_module.settings, "rsi_period", 5)
        response = client.post(
            "/api/v1/indicators/compute",
            json={"bars": bar_payload([float(i) for i in range(1, 31)])},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["params"]["macd_alignment"] == "tail"
        assert body["params"]["rsi_period"] == 5
        assert body["indicators"][25]["macd"] == pytest.approx(7.0)
        assert "rsi" in body["indicators"][5]

    def test_compute_rejects_unordered_dates(self, client):
        payload = list(reversed(bar_payload([1.0, 2.0, 3.0])))
        response = client.post("/api/v1/indicators/compute", json={"bars": payload})

        assert response.status_code == 422
        assert response.json()["detail"]["index"] == 1

    def test_compute_rejects_invalid_period(self, client):
        response = client.post(
            "/api/v1/indicators/compute",
            json={"bars": bar_payload([1.0]), "params": {"rsi_period": 0}},
        )
        assert response.status_code == 422

    def test_compute_empty_series(self, client):
        response = client.post("/api/v1/indicators/compute", json={"bars": []})

        assert response.status_code == 200
        assert response.json()["indicators"] == []

    def test_symbol_indicators(self, client):
        """History for the range is fetched and every bar gets a record."""
        response = client.get("/api/v1/indicators/aapl", params={"range": "3M"})

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "AAPL"
        assert body["time_range"] == "3M"
        assert len(body["indicators"]) == 91
        last = body["indicators"][-1]
        assert last["lower_band"] <= last["sma"] <= last["upper_band"]
        assert 0 <= last["rsi"] <= 100

    def test_symbol_indicators_param_override(self, client):
        response = client.get(
            "/api/v1/indicators/MSFT",
            params={"range": "1M", "rsi_period": 5, "bollinger_period": 10},
        )

        body = response.json()
        assert body["params"]["rsi_period"] == 5
        assert body["params"]["macd_slow_period"] == 26
        assert "rsi" in body["indicators"][5]
        assert "sma" in body["indicators"][9]

    def test_invalid_range(self, client):
        response = client.get("/api/v1/indicators/AAPL", params={"range": "5Y"})
        assert response.status_code == 422


class TestMarketEndpoints:
    """Tests for /api/v1/market."""

    def test_history(self, client):
        response = client.get("/api/v1/market/history/aapl", params={"range": "1W"})

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "AAPL"
        assert len(body["bars"]) == 8

    def test_quote(self, client):
        body = client.get("/api/v1/market/quote/tsla").json()

        assert body["symbol"] == "TSLA"
        assert body["name"] == "Tesla Inc."

    def test_sentiment(self, client):
        response = client.get("/api/v1/market/sentiment/AAPL", params={"days": 7})
        assert len(response.json()) == 8

    def test_predictions(self, client):
        assert len(client.get("/api/v1/market/predictions/AAPL").json()) == 5

    def test_search(self, client):
        body = client.get("/api/v1/market/search", params={"q": "apple"}).json()
        assert body[0]["symbol"] == "AAPL"

    def test_popular(self, client):
        body = client.get("/api/v1/market/popular", params={"count": 2}).json()
        assert [c["symbol"] for c in body] == ["AAPL", "MSFT"]

    def test_sector(self, client):
        assert client.get("/api/v1/market/sector/Energy").status_code == 200
        assert client.get("/api/v1/market/sector/Nothing").status_code == 404

    def test_status(self, client):
        body = client.get("/api/v1/market/status").json()

        assert body["provider"] == "mock"
        assert body["healthy"] is True

    def test_rate_limited(self, monkeypatch):
        """An exhausted provider budget maps to HTTP 429."""
        service = MarketDataService(
            provider=MockMarketDataProvider(seed=1),
            cache=MemoryCache(),
            rate_limiter=RateLimiter({"mock": (1, 60)}),
        )
        monkeypatch.setattr(market_service_module, "_service_instance", service)
        client = TestClient(app)

        assert client.get("/api/v1/market/quote/AAPL").status_code == 200
        assert client.get("/api/v1/market/quote/MSFT").status_code == 429
        assert client.get("/api/v1/indicators/MSFT").status_code == 429
