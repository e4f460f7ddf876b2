"""
Telegram Notifier

Best-effort alert delivery. Failures are logged and swallowed; they never
reach the caller.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.telegram.org"


class TelegramNotifier:
    """Sends plain-text messages to one Telegram chat."""

    def __init__(
        self,
        bot_token: Optional[str],
        chat_id: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
    ):
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def enabled(self) -> bool:
        """Alerting is off unless both token and chat id are configured."""
        return bool(self._bot_token and self._chat_id)

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def send(self, message: str) -> bool:
        """
        Deliver a message.

        Returns True on HTTP 200, False when disabled or on any failure.
        """
        if not self.enabled:
            logger.debug("Telegram not configured - skipping alert")
            return False

        url = f"{self._base_url}/bot{self._bot_token}/sendMessage"
        payload = {
            "chat_id": self._chat_id,
            "text": message,
            "disable_web_page_preview": True,
        }

        try:
            session = await self._ensure_session()
            async with session.post(url, json=payload) as resp:
                if resp.status != 200:
                    logger.warning(f"Telegram alert rejected ({resp.status}): {await resp.text()}")
                    return False
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Telegram alert failed: {e!r}")
            return False
        except Exception:
            logger.exception("Unexpected error delivering Telegram alert")
            return False

        logger.info("Telegram alert delivered")
        return True


_notifier_instance: Optional[TelegramNotifier] = None


def get_notifier() -> TelegramNotifier:
    """Get or create notifier instance."""
    global _notifier_instance
    if _notifier_instance is None:
        from fxsignal.core.config import get_settings

        settings = get_settings()
        _notifier_instance = TelegramNotifier(
            bot_token=settings.telegram_bot_token,
            chat_id=settings.telegram_chat_id,
            base_url=settings.telegram_base_url,
            timeout_seconds=settings.notify_timeout_seconds,
        )
    return _notifier_instance


async def close_notifier() -> None:
    """Close the shared notifier, if one was created."""
    global _notifier_instance
    if _notifier_instance is not None:
        await _notifier_instance.close()
        _notifier_instance = None
