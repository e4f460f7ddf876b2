"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fxsignal.core.market_hours import parse_window


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "FX Signal Desk"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    allowed_origins: list[str] = ["*"]

    # Twelve Data (candle provider)
    twelve_data_api_key: Optional[str] = None
    twelve_data_base_url: str = "https://api.twelvedata.com"
    candle_outputsize: int = 100
    provider_timeout_seconds: float = 10.0

    # Telegram (alerts are disabled unless both are set)
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    telegram_base_url: str = "https://api.telegram.org"
    notify_timeout_seconds: float = 10.0

    # Session / news filters (UTC). A window with start > end wraps past midnight.
    enable_session_filter: bool = True
    enable_news_filter: bool = True
    session_hours: list[tuple[int, int]] = [(7, 16), (12, 21)]  # London, New York
    news_blackout_windows: list[str] = ["13:00-14:00"]  # CPI / NFP releases

    # Signal rules
    flat_ema_epsilon: float = 1e-5

    @field_validator("session_hours")
    @classmethod
    def check_session_hours(cls, value: list[tuple[int, int]]) -> list[tuple[int, int]]:
        for start, end in value:
            if not (0 <= start <= 23 and 0 <= end <= 23):
                raise ValueError(f"Session hours must be within 0-23, got ({start}, {end})")
        return value

    @field_validator("news_blackout_windows")
    @classmethod
    def check_news_windows(cls, value: list[str]) -> list[str]:
        for window in value:
            parse_window(window)
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
