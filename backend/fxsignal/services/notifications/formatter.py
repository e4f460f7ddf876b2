"""
Alert message formatting.
"""

from fxsignal.schemas.risk import RiskParameters
from fxsignal.schemas.signal import Bias


def format_alert(
    pair: str,
    timeframe: str,
    bias: Bias,
    risk: RiskParameters,
    rsi: float,
) -> str:
    """Human-readable alert for a VALID signal."""
    lines = [
        f"{bias.value} SIGNAL - {pair} ({timeframe})",
        f"Entry: {risk.entry}",
        f"SL: {risk.sl}",
        f"TP: {risk.tp}",
        f"Expiry: {risk.expiry_minutes} min",
        f"RSI: {rsi:.2f}",
    ]
    return "\n".join(lines)
