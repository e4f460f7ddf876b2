"""
Risk Parameter Calculator

CONTRACT:
    Input:  Bias + latest Candle + timeframe
    Output: RiskParameters

RESPONSIBILITIES:
    - Entry at the signal candle close
    - Stop loss beyond the signal candle extreme
    - Take profit at a timeframe-dependent reward/risk multiple
    - Signal expiry window per timeframe

PURE PYTHON - All rules are deterministic and auditable.

A stop on the wrong side of entry is REJECTED, never passed through.
"""

from fxsignal.services.risk.calculator import (
    calculate_risk_parameters,
    expiry_minutes,
    reward_risk_ratio,
)

__all__ = [
    "calculate_risk_parameters",
    "expiry_minutes",
    "reward_risk_ratio",
]
