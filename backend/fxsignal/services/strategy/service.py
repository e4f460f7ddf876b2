"""
Signal Engine Implementation

Orchestrates one evaluation:
    Gates -> Candle Supplier -> Indicators -> Classifier -> Risk Calculator

The engine is side-effect free apart from the candle fetch. Alert delivery
is left to the caller via SignalEvaluation.alert_message.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from fxsignal.core.config import Settings, get_settings
from fxsignal.core.market_hours import evaluate_gates, get_utc_now, to_utc
from fxsignal.schemas.market import CandleQuery
from fxsignal.schemas.signal import (
    Bias,
    SignalRequest,
    SignalResult,
    SignalStatus,
)
from fxsignal.services.base import (
    ConfigurationError,
    InvalidRiskError,
    ServiceError,
    UpstreamDataError,
)
from fxsignal.services.data_ingestion import (
    CandleSupplierInterface,
    get_twelvedata_client,
    map_interval,
    map_symbol,
)
from fxsignal.services.data_ingestion.twelvedata_adapter import NO_DATA_MESSAGE
from fxsignal.services.indicators import calculate_snapshot
from fxsignal.services.notifications import format_alert
from fxsignal.services.risk import calculate_risk_parameters
from fxsignal.services.strategy.interface import SignalEngineInterface, SignalEvaluation
from fxsignal.services.strategy.rules import classify

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API key missing"


class SignalEngine(SignalEngineInterface):
    """
    Signal Engine.

    Configuration, candle supplier and clock are injected so every
    evaluation is reproducible in tests.
    """

    def __init__(
        self,
        settings: Settings,
        supplier: CandleSupplierInterface,
        clock: Callable[[], datetime] = get_utc_now,
    ):
        self._settings = settings
        self._supplier = supplier
        self._clock = clock

    async def evaluate(
        self,
        request: SignalRequest,
        now: Optional[datetime] = None,
    ) -> SignalEvaluation:
        """Evaluate one pair. Errors are returned as ERROR results."""
        now = to_utc(now) if now is not None else self._clock()

        try:
            return await self._evaluate(request, now)
        except ServiceError as e:
            logger.warning(f"Signal evaluation failed for {request.pair} {request.timeframe}: {e}")
            return SignalEvaluation(result=SignalResult.error(e.message))
        except Exception as e:
            logger.exception(f"Unexpected error evaluating {request.pair} {request.timeframe}")
            return SignalEvaluation(result=SignalResult.error(str(e)))

    async def _evaluate(self, request: SignalRequest, now: datetime) -> SignalEvaluation:
        pair = request.pair.strip().upper()
        timeframe = request.timeframe.strip()

        # 1. Session / news filters
        gate = evaluate_gates(
            now,
            session_hours=self._settings.session_hours,
            news_windows=self._settings.news_blackout_windows,
            session_filter=self._settings.enable_session_filter,
            news_filter=self._settings.enable_news_filter,
        )
        if not gate.allowed:
            logger.info(f"{pair} {timeframe} blocked at {now:%H:%M} UTC: {gate.reason}")
            return SignalEvaluation(result=SignalResult.blocked(gate.reason))

        # 2. Credentials, checked before any network call
        if not self._settings.twelve_data_api_key:
            raise ConfigurationError(self.name, API_KEY_MISSING)

        # 3. Candles, reversed to oldest first
        query = CandleQuery(
            symbol=map_symbol(pair),
            interval=map_interval(timeframe),
            outputsize=self._settings.candle_outputsize,
        )
        candles = await self._supplier.execute(query)
        if not candles:
            raise UpstreamDataError(self._supplier.name, NO_DATA_MESSAGE)
        candles = list(reversed(candles))
        last = candles[-1]

        # 4. Indicators + classification
        snapshot = calculate_snapshot([c.close for c in candles])
        classification = classify(snapshot, last, epsilon=self._settings.flat_ema_epsilon)

        result = SignalResult(
            status=classification.status,
            bias=classification.bias,
            ema20=snapshot.ema20,
            ema50=snapshot.ema50,
            rsi=snapshot.rsi,
            candle_time=last.timestamp,
        )
        if classification.status != SignalStatus.VALID:
            return SignalEvaluation(result=result)

        # 5. Risk parameters
        try:
            risk = calculate_risk_parameters(classification.bias, last, timeframe, now)
        except InvalidRiskError as e:
            logger.warning(f"{pair} {timeframe} signal rejected: {e.message}")
            rejected = result.model_copy(
                update={"status": SignalStatus.NO_TRADE, "bias": Bias.NONE, "reason": e.message}
            )
            return SignalEvaluation(result=rejected)

        result = result.model_copy(
            update={
                "entry": risk.entry,
                "sl": risk.sl,
                "tp": risk.tp,
                "expiry_time": risk.expiry_time,
            }
        )
        logger.info(
            f"VALID {classification.bias.value} {pair} {timeframe}: "
            f"entry={risk.entry} sl={risk.sl} tp={risk.tp}"
        )

        message = format_alert(pair, timeframe, classification.bias, risk, snapshot.rsi)
        return SignalEvaluation(result=result, alert_message=message)


_engine_instance: Optional[SignalEngine] = None


def get_signal_engine() -> SignalEngine:
    """Get or create signal engine instance."""
    global _engine_instance
    if _engine_instance is None:
        _engine_instance = SignalEngine(
            settings=get_settings(),
            supplier=get_twelvedata_client(),
        )
    return _engine_instance
