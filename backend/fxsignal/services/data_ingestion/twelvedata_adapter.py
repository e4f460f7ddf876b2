"""
Twelve Data Adapter

Fetches OHLC time series for FX pairs and metals from Twelve Data.
One attempt per request, bounded by a total timeout. No retries.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from fxsignal.schemas.market import Candle, CandleQuery
from fxsignal.services.base import UpstreamDataError
from fxsignal.services.data_ingestion.interface import CandleSupplierInterface

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.twelvedata.com"
NO_DATA_MESSAGE = "No candle data returned"


def parse_time_series(payload: Any, source: str = "TwelveData") -> list[Candle]:
    """
    Convert a `time_series` response into candles (newest first).

    Twelve Data reports errors in-band as {"status": "error", "message": ...}
    with no `values` key.
    """
    if not isinstance(payload, dict) or not payload.get("values"):
        message = payload.get("message") if isinstance(payload, dict) else None
        raise UpstreamDataError(source, message or NO_DATA_MESSAGE)

    try:
        return [Candle.model_validate(row) for row in payload["values"]]
    except ValidationError as e:
        raise UpstreamDataError(source, f"Malformed candle data: {e.error_count()} invalid field(s)") from e


class TwelveDataClient(CandleSupplierInterface):
    """
    Twelve Data REST client.

    The HTTP session is created lazily and reused across requests.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def name(self) -> str:
        return "TwelveData"

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def execute(self, input_data: CandleQuery) -> list[Candle]:
        """Fetch candles for one symbol / interval."""
        params = {
            "symbol": input_data.symbol,
            "interval": input_data.interval,
            "outputsize": str(input_data.outputsize),
            "apikey": self._api_key or "",
        }

        try:
            session = await self._ensure_session()
            async with session.get(f"{self._base_url}/time_series", params=params) as resp:
                payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Twelve Data request failed for {input_data.symbol}: {e!r}")
            raise UpstreamDataError(self.name, f"Data provider request failed: {e!r}") from e

        candles = parse_time_series(payload, source=self.name)
        logger.debug(f"Twelve Data returned {len(candles)} candles for {input_data.symbol} {input_data.interval}")
        return candles

    async def health_check(self) -> bool:
        """Healthy when a key is configured."""
        return bool(self._api_key)


_client_instance: Optional[TwelveDataClient] = None


def get_twelvedata_client() -> TwelveDataClient:
    """Get or create Twelve Data client instance."""
    global _client_instance
    if _client_instance is None:
        from fxsignal.core.config import get_settings

        settings = get_settings()
        _client_instance = TwelveDataClient(
            api_key=settings.twelve_data_api_key,
            base_url=settings.twelve_data_base_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )
    return _client_instance


async def close_twelvedata_client() -> None:
    """Close the shared client, if one was created."""
    global _client_instance
    if _client_instance is not None:
        await _client_instance.close()
        _client_instance = None
