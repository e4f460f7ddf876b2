"""
FX Signal Desk Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from fxsignal.schemas.market import (
    Candle,
    CandleQuery,
)
from fxsignal.schemas.indicators import IndicatorSnapshot
from fxsignal.schemas.risk import RiskParameters
from fxsignal.schemas.signal import (
    Bias,
    Classification,
    SignalRequest,
    SignalResult,
    SignalStatus,
)

__all__ = [
    # Market
    "Candle",
    "CandleQuery",
    # Indicators
    "IndicatorSnapshot",
    # Risk
    "RiskParameters",
    # Signal
    "Bias",
    "Classification",
    "SignalRequest",
    "SignalResult",
    "SignalStatus",
]
