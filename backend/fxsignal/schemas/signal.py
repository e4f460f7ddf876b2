"""
CONTRACT 4: Signal Evaluation

Input: SignalRequest
Output: SignalResult

This is the only response the analyzer produces. Nothing is persisted;
every evaluation starts from a fresh candle fetch.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalStatus(str, Enum):
    WAIT = "WAIT"  # Trend present but no confirmation
    NO_TRADE = "NO TRADE"  # Flat EMAs, filtered session, or rejected risk
    VALID = "VALID"  # Tradeable setup
    ERROR = "ERROR"  # Configuration / provider / runtime failure


class Bias(str, Enum):
    NONE = "NONE"
    BUY = "BUY"
    SELL = "SELL"


# =============================================================================
# INPUT: SignalRequest
# =============================================================================


class SignalRequest(BaseModel):
    """
    Request for a signal evaluation.
    Sent by: Frontend / alert bot
    Received by: Signal Engine
    """

    pair: str = Field(
        ...,
        min_length=1,
        description="Pair symbol (e.g., 'XAUUSD', 'EURUSD')",
    )
    timeframe: str = Field(
        default="15min",
        min_length=1,
        description="Candle interval (e.g., '5min', '15min', '60min')",
    )


# =============================================================================
# OUTPUT: SignalResult
# =============================================================================


class Classification(BaseModel):
    """Status / bias pair. Bias is NONE unless status is VALID."""

    status: SignalStatus
    bias: Bias = Bias.NONE


class SignalResult(BaseModel):
    """
    Complete evaluation result.
    Returned by: Signal Engine
    Consumed by: Frontend, alert dispatch
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "VALID",
                "bias": "BUY",
                "entry": 2034.55,
                "sl": 2031.1,
                "tp": 2038.69,
                "expiryTime": "2024-02-04T10:35:00+00:00",
                "ema20": 2030.12,
                "ema50": 2027.84,
                "rsi": 48.3,
                "candleTime": "2024-02-04 10:30:00",
                "reason": None,
            }
        },
    )

    status: SignalStatus
    bias: Bias = Bias.NONE
    entry: Optional[float] = None
    sl: Optional[float] = None
    tp: Optional[float] = None
    expiry_time: Optional[datetime] = Field(default=None, alias="expiryTime")
    ema20: Optional[float] = None
    ema50: Optional[float] = None
    rsi: Optional[float] = None
    candle_time: Optional[str] = Field(default=None, alias="candleTime")
    reason: Optional[str] = None

    @classmethod
    def error(cls, reason: str) -> "SignalResult":
        return cls(status=SignalStatus.ERROR, reason=reason)

    @classmethod
    def blocked(cls, reason: str) -> "SignalResult":
        return cls(status=SignalStatus.NO_TRADE, reason=reason)
