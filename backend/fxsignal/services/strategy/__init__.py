"""
Signal Engine

CONTRACT:
    Input:  SignalRequest (pair + timeframe)
    Output: SignalEvaluation (SignalResult + optional alert text)

RESPONSIBILITIES:
    - Apply session / news-blackout filters
    - Fetch candles and compute EMA20 / EMA50 / RSI14
    - Classify WAIT / NO TRADE / VALID
    - Derive entry, stop, target and expiry for VALID signals
    - Convert every failure into an ERROR result

No persistence - each evaluation is independent.
"""

from fxsignal.services.strategy.interface import (
    SignalEngineInterface,
    SignalEvaluation,
)
from fxsignal.services.strategy.rules import classify
from fxsignal.services.strategy.service import SignalEngine, get_signal_engine

__all__ = [
    "SignalEngineInterface",
    "SignalEvaluation",
    "SignalEngine",
    "classify",
    "get_signal_engine",
]
