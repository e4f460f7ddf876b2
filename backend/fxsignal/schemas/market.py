"""
CONTRACT 1: Market Data

Input: SignalRequest (pair + timeframe)
Output: list[Candle], newest first as the provider sends them

Candles are immutable once received.
"""

from pydantic import BaseModel, ConfigDict, Field


class Candle(BaseModel):
    """Single candlestick data point."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    open: float
    high: float
    low: float
    close: float
    timestamp: str = Field(..., alias="datetime", description="Provider candle time")

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        return self.close < self.open


class CandleQuery(BaseModel):
    """Provider-side query after symbol / interval translation."""

    symbol: str
    interval: str
    outputsize: int = Field(default=100, ge=1, le=5000)
