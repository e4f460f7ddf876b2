"""
Shared fixtures: candle builders, a stub candle supplier and test settings.
"""
from datetime import datetime, timedelta, timezone

import pytest

from fxsignal.core.config import Settings
from fxsignal.schemas.market import Candle, CandleQuery
from fxsignal.services.data_ingestion import CandleSupplierInterface

LONDON_MORNING = datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)


def make_candle(close, open_=None, high=None, low=None, when="2024-03-05 09:55:00"):
    open_ = close if open_ is None else open_
    return Candle(
        open=open_,
        high=max(open_, close) if high is None else high,
        low=min(open_, close) if low is None else low,
        close=close,
        datetime=when,
    )


def oscillating_start():
    """15 closes alternating 100 / 101: seven +1 and seven -1 moves, RSI == 50."""
    return [100.0 if i % 2 == 0 else 101.0 for i in range(15)]


def series_to_candles(closes, last_open, last_high, last_low):
    """Oldest-first closes -> newest-first candles, last candle shaped explicitly."""
    start = datetime(2024, 3, 5, 5, 0)
    candles = [
        make_candle(c, when=(start + timedelta(minutes=5 * i)).strftime("%Y-%m-%d %H:%M:%S"))
        for i, c in enumerate(closes[:-1])
    ]
    when = (start + timedelta(minutes=5 * (len(closes) - 1))).strftime("%Y-%m-%d %H:%M:%S")
    candles.append(make_candle(closes[-1], open_=last_open, high=last_high, low=last_low, when=when))
    return list(reversed(candles))


def uptrend_candles(bullish_last=True):
    closes = oscillating_start() + [100.0 + 0.5 * (i - 14) for i in range(15, 60)]
    last = closes[-1]
    if bullish_last:
        return series_to_candles(closes, last_open=last - 0.2, last_high=last + 0.1, last_low=last - 1.0)
    return series_to_candles(closes, last_open=last + 0.2, last_high=last + 0.3, last_low=last - 0.1)


def downtrend_candles():
    closes = oscillating_start() + [100.0 - 0.5 * (i - 14) for i in range(15, 60)]
    last = closes[-1]
    return series_to_candles(closes, last_open=last + 0.2, last_high=last + 1.0, last_low=last - 0.1)


def flat_candles(count=60):
    return series_to_candles([100.0] * count, last_open=100.0, last_high=100.0, last_low=100.0)


class StubSupplier(CandleSupplierInterface):
    """Returns canned candles (newest first) and records every query."""

    def __init__(self, candles=None, error=None):
        self.candles = candles or []
        self.error = error
        self.queries: list[CandleQuery] = []

    @property
    def calls(self) -> int:
        return len(self.queries)

    async def execute(self, input_data: CandleQuery):
        self.queries.append(input_data)
        if self.error is not None:
            raise self.error
        return list(self.candles)

    async def health_check(self) -> bool:
        return True


def make_settings(**overrides) -> Settings:
    values = {
        "twelve_data_api_key": "test-key",
        "telegram_bot_token": None,
        "telegram_chat_id": None,
        "enable_session_filter": True,
        "enable_news_filter": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()
