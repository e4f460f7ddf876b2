"""
Signal Engine Interface

Evaluates one pair / timeframe and returns the result plus an optional alert.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fxsignal.services.base import BaseService
from fxsignal.schemas.signal import SignalRequest, SignalResult, SignalStatus


@dataclass
class SignalEvaluation:
    """Engine output: the response record and the alert to dispatch, if any."""

    result: SignalResult
    alert_message: Optional[str] = None

    @property
    def alert_requested(self) -> bool:
        return self.alert_message is not None and self.result.status == SignalStatus.VALID


class SignalEngineInterface(BaseService[SignalRequest, SignalEvaluation]):
    """
    Signal Engine Contract.

    INPUT: SignalRequest
        - pair: Pair symbol (e.g. 'XAUUSD')
        - timeframe: Candle interval (e.g. '5min')

    OUTPUT: SignalEvaluation
        - result: SignalResult (status, bias, levels, indicators)
        - alert_message: Formatted alert when status is VALID

    PIPELINE:
        Session / news gates  -> NO TRADE when blocked
        Credential check      -> ERROR "API key missing"
        Candle fetch          -> ERROR on provider failure
        EMA20 / EMA50 / RSI14
        Classification
        Risk parameters       -> only when VALID

    Never raises: every failure becomes an ERROR result.
    """

    @property
    def name(self) -> str:
        return "SignalEngine"

    @abstractmethod
    async def evaluate(
        self,
        request: SignalRequest,
        now: Optional[datetime] = None,
    ) -> SignalEvaluation:
        """Evaluate at `now` (UTC). Defaults to the current time."""
        pass

    async def execute(self, input_data: SignalRequest) -> SignalEvaluation:
        return await self.evaluate(input_data)

    async def health_check(self) -> bool:
        """Signal engine is always healthy (pure computation)."""
        return True
