"""
FX Signal Desk - FastAPI Application

Main entry point for the analyzer API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fxsignal.core.config import settings
from fxsignal.api.v1 import router as api_v1_router
from fxsignal.api.v1.endpoints import signal
from fxsignal.schemas.signal import SignalResult

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    if not settings.twelve_data_api_key:
        logger.warning("TWELVE_DATA_API_KEY not set - /analyze will return ERROR")
    if not (settings.telegram_bot_token and settings.telegram_chat_id):
        logger.info("Telegram alerts disabled (token or chat id missing)")

    yield

    # Shutdown
    logger.info("Shutting down...")
    from fxsignal.services.data_ingestion import close_twelvedata_client
    from fxsignal.services.notifications import close_notifier
    await close_twelvedata_client()
    await close_notifier()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    FX Signal Desk API

    ## Architecture
    - **Data Ingestion**: Fetches OHLC candles from Twelve Data
    - **Indicator Engine**: EMA20 / EMA50 / RSI14 (pure Python/NumPy)
    - **Classifier**: Deterministic WAIT / NO TRADE / VALID rules
    - **Risk Calculator**: Entry, stop loss, take profit, expiry
    - **Alerts**: Telegram notification for VALID signals

    ## Core Principles
    - Stateless: every request recomputes from fresh candles
    - Session and news filters before any analysis
    - Errors are answered, never raised
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")

# Unversioned path kept for existing frontends
app.add_api_route(
    "/analyze",
    signal.analyze,
    methods=["POST"],
    response_model=SignalResult,
    tags=["Signals"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "FX Signal Desk API",
        "docs": "/docs",
        "health": "/health",
        "analyze": "/analyze",
    }
