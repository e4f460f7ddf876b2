"""
Signal Classification Rules

Maps (EMA20, EMA50, RSI, latest candle) to a status / bias pair.
First matching rule wins:

    1. |EMA20 - EMA50| < epsilon                        -> NO TRADE
    2. EMA20 > EMA50, 40 <= RSI <= 55, bullish candle   -> VALID BUY
    3. EMA20 < EMA50, 45 <= RSI <= 60, bearish candle   -> VALID SELL
    4. otherwise                                        -> WAIT
"""

from fxsignal.schemas.indicators import IndicatorSnapshot
from fxsignal.schemas.market import Candle
from fxsignal.schemas.signal import Bias, Classification, SignalStatus

FLAT_EMA_EPSILON = 1e-5

BUY_RSI_BAND = (40.0, 55.0)
SELL_RSI_BAND = (45.0, 60.0)


def classify(
    snapshot: IndicatorSnapshot,
    last: Candle,
    epsilon: float = FLAT_EMA_EPSILON,
) -> Classification:
    """Classify the market state at the latest candle."""
    ema_fast, ema_slow, rsi = snapshot.ema20, snapshot.ema50, snapshot.rsi

    if abs(ema_fast - ema_slow) < epsilon:
        return Classification(status=SignalStatus.NO_TRADE)

    buy_low, buy_high = BUY_RSI_BAND
    if ema_fast > ema_slow and buy_low <= rsi <= buy_high and last.is_bullish:
        return Classification(status=SignalStatus.VALID, bias=Bias.BUY)

    sell_low, sell_high = SELL_RSI_BAND
    if ema_fast < ema_slow and sell_low <= rsi <= sell_high and last.is_bearish:
        return Classification(status=SignalStatus.VALID, bias=Bias.SELL)

    return Classification(status=SignalStatus.WAIT)
