"""
Signal API Endpoints

Pair analysis and session/news filter status.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from fxsignal.core.config import Settings, get_settings
from fxsignal.core.market_hours import get_market_status
from fxsignal.schemas.signal import SignalRequest, SignalResult
from fxsignal.services.notifications import TelegramNotifier, get_notifier
from fxsignal.services.strategy import SignalEngineInterface, get_signal_engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=SignalResult)
async def analyze(
    request: SignalRequest,
    background_tasks: BackgroundTasks,
    engine: SignalEngineInterface = Depends(get_signal_engine),
    notifier: TelegramNotifier = Depends(get_notifier),
) -> SignalResult:
    """
    Evaluate a pair on one timeframe.

    Always answers 200: configuration, provider and runtime failures come
    back as status ERROR with a reason. VALID signals are pushed to Telegram
    after the response is sent.
    """
    evaluation = await engine.evaluate(request)

    if evaluation.alert_requested and notifier.enabled:
        background_tasks.add_task(notifier.send, evaluation.alert_message)

    return evaluation.result


@router.get("/gates")
async def get_gates(settings: Settings = Depends(get_settings)):
    """
    Current session / news filter status (UTC).
    """
    return get_market_status(
        session_hours=settings.session_hours,
        news_windows=settings.news_blackout_windows,
        session_filter=settings.enable_session_filter,
        news_filter=settings.enable_news_filter,
    )
