"""
Indicator Engine

CONTRACT:
    Input:  closes (oldest first)
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - EMA(20) / EMA(50) trend filter
    - RSI(14) momentum filter

PURE PYTHON - Uses NumPy arrays.
All math is deterministic and reproducible.
"""

from fxsignal.services.indicators.calculations import calculate_snapshot, ema, rsi

__all__ = [
    "calculate_snapshot",
    "ema",
    "rsi",
]
