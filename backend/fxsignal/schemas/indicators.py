"""
CONTRACT 2: Indicator Engine

Input: closes, oldest first
Output: IndicatorSnapshot

Recomputed from scratch on every evaluation.
"""

from pydantic import BaseModel

EMA_FAST_PERIOD = 20
EMA_SLOW_PERIOD = 50
RSI_PERIOD = 14


class IndicatorSnapshot(BaseModel):
    """Indicator values at the latest candle."""

    ema20: float
    ema50: float
    rsi: float
