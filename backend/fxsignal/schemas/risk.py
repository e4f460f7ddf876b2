"""
CONTRACT 3: Risk Parameters

Input: bias + latest candle + timeframe
Output: RiskParameters

DETERMINISTIC - entry at the close, stop at the candle extreme,
target at a timeframe-dependent multiple of the risk.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


# Reward / risk multiples
SCALP_TIMEFRAME = "5min"
SCALP_REWARD_RISK = 1.2
DEFAULT_REWARD_RISK = 1.5

# Signal validity in minutes
EXPIRY_MINUTES = {
    "5min": 5,
    "15min": 15,
}
DEFAULT_EXPIRY_MINUTES = 60


class RiskParameters(BaseModel):
    """Entry / exit levels for a VALID signal. All null otherwise."""

    entry: Optional[float] = None
    sl: Optional[float] = None
    tp: Optional[float] = None
    expiry_time: Optional[datetime] = None
    expiry_minutes: Optional[int] = Field(default=None, exclude=True)
