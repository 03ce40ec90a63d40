"""Tests for the indicator service."""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from stockdash.core.config import Settings
from stockdash.schemas.indicators import (
    IndicatorParams,
    IndicatorRequest,
    MacdAlignment,
)
from stockdash.services.base import ValidationError
from stockdash.services.indicators import IndicatorService, get_indicator_service
from stockdash.services.indicators import service as service_module
from stockdash.services.indicators.service import default_params

from tests.conftest import make_bars


class TestIndicatorService:
    """Tests for IndicatorService."""

    async def test_execute_returns_record_per_bar(self):
        """execute wraps the merged records with symbol and params."""
        service = IndicatorService()
        bars = make_bars([100.0 + i for i in range(40)])

        response = await service.execute(IndicatorRequest(symbol="AAPL", bars=bars))

        assert response.symbol == "AAPL"
        assert len(response.indicators) == 40
        assert response.params == IndicatorParams()
        assert response.indicators[-1].rsi == 100.0

    async def test_execute_applies_params(self):
        """Request parameters reach the calculations."""
        service = IndicatorService()
        bars = make_bars([float(i) for i in range(1, 41)])
        params = IndicatorParams(rsi_period=5, macd_alignment=MacdAlignment.TAIL)

        response = await service.execute(IndicatorRequest(bars=bars, params=params))

        assert response.indicators[5].rsi is not None
        assert response.indicators[25].macd == pytest.approx(7.0)

    async def test_execute_without_params_uses_settings(self, monkeypatch):
        """Omitted params resolve to the configured defaults and are echoed back."""
        monkeypatch.setattr(service_module.settings, "macd_alignment", MacdAlignment.TAIL)
        monkeypatch.setattr(service_module.settings, "rsi_period", 5)
        service = IndicatorService()
        bars = make_bars([float(i) for i in range(1, 31)])

        response = await service.execute(IndicatorRequest(bars=bars))

        assert response.params.macd_alignment == MacdAlignment.TAIL
        assert response.params.rsi_period == 5
        assert response.indicators[5].rsi is not None
        assert response.indicators[25].macd == pytest.approx(7.0)

    async def test_rejects_descending_dates(self):
        """Out-of-order bars raise ValidationError."""
        service = IndicatorService()
        bars = list(reversed(make_bars([1.0, 2.0, 3.0])))

        with pytest.raises(ValidationError) as exc_info:
            await service.execute(IndicatorRequest(bars=bars))

        assert exc_info.value.details["index"] == 1

    async def test_rejects_duplicate_dates(self):
        """Two bars on the same day raise ValidationError."""
        service = IndicatorService()
        bars = make_bars([1.0, 2.0])
        bars[1] = bars[1].model_copy(update={"date": date(2024, 1, 1)})

        with pytest.raises(ValidationError):
            await service.execute(IndicatorRequest(bars=bars))

    async def test_validation_can_be_disabled(self):
        """validate_dates=False trusts the input as-is."""
        service = IndicatorService()
        bars = list(reversed(make_bars([1.0, 2.0, 3.0])))

        response = await service.execute(IndicatorRequest(bars=bars, validate_dates=False))

        assert [r.date for r in response.indicators] == [b.date for b in bars]

    def test_calculate_defaults_to_settings(self):
        """calculate without params uses the configured defaults."""
        service = IndicatorService()
        records = service.calculate(make_bars([50.0] * 21))

        assert records[19].sma == 50.0
        assert records[14].rsi == 100.0

    def test_default_params_from_settings(self):
        """Settings defaults match the dashboard's standard periods."""
        params = default_params()

        assert params.rsi_period == 14
        assert params.macd_fast_period == 12
        assert params.macd_slow_period == 26
        assert params.macd_signal_period == 9
        assert params.bollinger_period == 20
        assert params.bollinger_std_dev == 2.0
        assert params.macd_alignment == MacdAlignment.HEAD

    def test_settings_parse_alignment(self):
        """MACD alignment is validated when settings load."""
        assert Settings(macd_alignment="tail").macd_alignment == MacdAlignment.TAIL

        with pytest.raises(PydanticValidationError):
            Settings(macd_alignment="sideways")

    async def test_health_check(self):
        """Pure computation is always healthy."""
        assert await IndicatorService().health_check() is True

    def test_singleton(self):
        """get_indicator_service returns a shared instance."""
        assert get_indicator_service() is get_indicator_service()
