"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
All math is deterministic. Downstream thresholds were tuned against these
exact formulas, so the recursions are kept sequential (no vectorized sums).
"""

from typing import Sequence

import numpy as np

from fxsignal.schemas.indicators import (
    EMA_FAST_PERIOD,
    EMA_SLOW_PERIOD,
    RSI_PERIOD,
    IndicatorSnapshot,
)
from fxsignal.services.base import InvalidInputError

SERVICE_NAME = "IndicatorEngine"


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def ema(data: Sequence[float], period: int) -> np.ndarray:
    """
    Exponential Moving Average.

    Seeded with the first value rather than an SMA, so the output has the
    same length as the input and no leading NaNs.
    """
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        raise InvalidInputError(SERVICE_NAME, "EMA requires a non-empty series")
    if period < 1:
        raise InvalidInputError(SERVICE_NAME, f"EMA period must be >= 1, got {period}")

    multiplier = 2 / (period + 1)
    result = np.empty(values.size)
    result[0] = values[0]

    for i in range(1, values.size):
        result[i] = values[i] * multiplier + result[i - 1] * (1 - multiplier)

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: Sequence[float], period: int = RSI_PERIOD) -> float:
    """
    Relative Strength Index over the first `period` transitions.

    Gains and losses are plain sums, not Wilder averages; the ratio is the
    same either way. Candles after index `period` are ignored.
    """
    values = np.asarray(closes, dtype=float)
    if values.size < period + 1:
        raise InvalidInputError(
            SERVICE_NAME,
            f"RSI({period}) needs at least {period + 1} closes, got {values.size}",
        )

    gains = 0.0
    losses = 0.0
    for i in range(1, period + 1):
        diff = float(values[i] - values[i - 1])
        if diff >= 0:
            gains += diff
        else:
            losses -= diff

    rs = gains / (losses or 1)
    return 100 - 100 / (1 + rs)


# =============================================================================
# SNAPSHOT
# =============================================================================


def calculate_snapshot(closes: Sequence[float]) -> IndicatorSnapshot:
    """EMA20 / EMA50 at the last close plus RSI14. Closes must be oldest first."""
    return IndicatorSnapshot(
        ema20=float(ema(closes, EMA_FAST_PERIOD)[-1]),
        ema50=float(ema(closes, EMA_SLOW_PERIOD)[-1]),
        rsi=float(rsi(closes, RSI_PERIOD)),
    )
