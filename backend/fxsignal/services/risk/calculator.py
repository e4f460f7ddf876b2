"""
Risk Parameter Calculator

Derives entry / stop loss / take profit / expiry for a VALID signal.
PURE PYTHON - All rules are deterministic and auditable.
"""

from datetime import datetime, timedelta

from fxsignal.schemas.market import Candle
from fxsignal.schemas.risk import (
    DEFAULT_EXPIRY_MINUTES,
    DEFAULT_REWARD_RISK,
    EXPIRY_MINUTES,
    SCALP_REWARD_RISK,
    SCALP_TIMEFRAME,
    RiskParameters,
)
from fxsignal.schemas.signal import Bias
from fxsignal.services.base import InvalidInputError, InvalidRiskError

SERVICE_NAME = "RiskCalculator"


def reward_risk_ratio(timeframe: str) -> float:
    """Tighter targets on the scalping timeframe."""
    return SCALP_REWARD_RISK if timeframe == SCALP_TIMEFRAME else DEFAULT_REWARD_RISK


def expiry_minutes(timeframe: str) -> int:
    return EXPIRY_MINUTES.get(timeframe, DEFAULT_EXPIRY_MINUTES)


def calculate_risk_parameters(
    bias: Bias,
    last: Candle,
    timeframe: str,
    now: datetime,
) -> RiskParameters:
    """
    Entry at the close, stop beyond the signal candle.

    BUY:  sl = low,  tp = entry + (entry - sl) * rr
    SELL: sl = high, tp = entry - (sl - entry) * rr

    Raises:
        InvalidRiskError: stop is not on the losing side of entry
        InvalidInputError: bias is NONE
    """
    entry = last.close
    rr = reward_risk_ratio(timeframe)

    if bias == Bias.BUY:
        sl = last.low
        risk = entry - sl
        tp = entry + risk * rr
    elif bias == Bias.SELL:
        sl = last.high
        risk = sl - entry
        tp = entry - risk * rr
    else:
        raise InvalidInputError(SERVICE_NAME, "Risk parameters require a BUY or SELL bias")

    if risk <= 0:
        raise InvalidRiskError(
            SERVICE_NAME,
            f"Non-positive risk: {bias.value} entry {entry} with stop {sl}",
            details={"entry": entry, "sl": sl, "risk": risk},
        )

    minutes = expiry_minutes(timeframe)
    return RiskParameters(
        entry=entry,
        sl=sl,
        tp=tp,
        expiry_time=now + timedelta(minutes=minutes),
        expiry_minutes=minutes,
    )
