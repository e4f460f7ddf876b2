"""
Risk Calculator Tests
"""
from datetime import datetime, timedelta, timezone

import pytest

from fxsignal.schemas.signal import Bias
from fxsignal.services.base import InvalidInputError, InvalidRiskError
from fxsignal.services.risk import calculate_risk_parameters, expiry_minutes, reward_risk_ratio

from conftest import make_candle

NOW = datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)


class TestRatios:

    def test_reward_risk(self):
        assert reward_risk_ratio("5min") == 1.2
        assert reward_risk_ratio("15min") == 1.5
        assert reward_risk_ratio("60min") == 1.5

    def test_expiry(self):
        assert expiry_minutes("5min") == 5
        assert expiry_minutes("15min") == 15
        assert expiry_minutes("60min") == 60
        assert expiry_minutes("1day") == 60


class TestBuy:

    def test_scalp_levels(self):
        last = make_candle(1.2000, open_=1.1980, low=1.1950)
        risk = calculate_risk_parameters(Bias.BUY, last, "5min", NOW)
        assert risk.entry == 1.2000
        assert risk.sl == 1.1950
        assert risk.tp == pytest.approx(1.2060)
        assert risk.expiry_time == NOW + timedelta(minutes=5)

    def test_stop_above_entry_rejected(self):
        last = make_candle(1.2000, open_=1.1980, low=1.2010)
        with pytest.raises(InvalidRiskError):
            calculate_risk_parameters(Bias.BUY, last, "5min", NOW)

    def test_zero_risk_rejected(self):
        last = make_candle(1.2000, open_=1.1980, low=1.2000)
        with pytest.raises(InvalidRiskError):
            calculate_risk_parameters(Bias.BUY, last, "15min", NOW)


class TestSell:

    def test_hourly_levels(self):
        last = make_candle(1.2000, open_=1.2020, high=1.2050)
        risk = calculate_risk_parameters(Bias.SELL, last, "60min", NOW)
        assert risk.entry == 1.2000
        assert risk.sl == 1.2050
        assert risk.tp == pytest.approx(1.1925)
        assert risk.expiry_time == NOW + timedelta(minutes=60)

    def test_fifteen_minute_expiry(self):
        last = make_candle(1.2000, open_=1.2020, high=1.2050)
        risk = calculate_risk_parameters(Bias.SELL, last, "15min", NOW)
        assert risk.expiry_time == NOW + timedelta(minutes=15)

    def test_stop_below_entry_rejected(self):
        last = make_candle(1.2000, open_=1.2020, high=1.1990)
        with pytest.raises(InvalidRiskError):
            calculate_risk_parameters(Bias.SELL, last, "60min", NOW)


def test_no_bias_rejected():
    with pytest.raises(InvalidInputError):
        calculate_risk_parameters(Bias.NONE, make_candle(1.2), "5min", NOW)
