"""
Market Hours Utility

Session and news-blackout filters for FX / metals, evaluated in UTC.
"""

from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional
import pytz

UTC = pytz.utc

# Inclusive UTC hour windows
LONDON_SESSION = (7, 16)
NEW_YORK_SESSION = (12, 21)
DEFAULT_SESSION_HOURS = [LONDON_SESSION, NEW_YORK_SESSION]

# High-impact releases (CPI / NFP) land at 13:30 UTC
DEFAULT_NEWS_BLACKOUTS = ["13:00-14:00"]


@dataclass(frozen=True)
class GateDecision:
    """Outcome of the session and news filters for one instant."""

    allowed: bool
    session_open: bool
    news_blackout: bool
    reason: Optional[str] = None


def get_utc_now() -> datetime:
    """Get current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_window(window: str) -> tuple[time, time]:
    """Parse an 'HH:MM-HH:MM' window."""
    try:
        start, end = window.split("-")
        start_h, start_m = (int(p) for p in start.strip().split(":"))
        end_h, end_m = (int(p) for p in end.strip().split(":"))
        return time(start_h, start_m), time(end_h, end_m)
    except ValueError as e:
        raise ValueError(f"Invalid time window '{window}': expected HH:MM-HH:MM") from e


def in_window(value, start, end) -> bool:
    """Inclusive range check. A window with start > end wraps past midnight."""
    if start <= end:
        return start <= value <= end
    return value >= start or value <= end


def is_session_open(
    dt: datetime,
    session_hours: Iterable[tuple[int, int]] = DEFAULT_SESSION_HOURS,
) -> bool:
    """Check if the UTC hour falls inside any trading session (inclusive)."""
    hour = to_utc(dt).hour
    return any(in_window(hour, start, end) for start, end in session_hours)


def is_news_blackout(
    dt: datetime,
    windows: Iterable[str] = DEFAULT_NEWS_BLACKOUTS,
) -> bool:
    """Check if the UTC time of day falls inside a news blackout (inclusive)."""
    now = to_utc(dt)
    current = time(now.hour, now.minute)
    for window in windows:
        start, end = parse_window(window)
        if in_window(current, start, end):
            return True
    return False


def evaluate_gates(
    dt: datetime,
    session_hours: Iterable[tuple[int, int]] = DEFAULT_SESSION_HOURS,
    news_windows: Iterable[str] = DEFAULT_NEWS_BLACKOUTS,
    session_filter: bool = True,
    news_filter: bool = True,
) -> GateDecision:
    """Apply both filters. The session check runs first."""
    session_open = is_session_open(dt, session_hours) if session_filter else True
    blackout = is_news_blackout(dt, news_windows) if news_filter else False

    if not session_open:
        return GateDecision(False, session_open, blackout, "Outside trading session")
    if blackout:
        return GateDecision(False, session_open, blackout, "High-impact news window")
    return GateDecision(True, session_open, blackout)


def get_market_status(dt: Optional[datetime] = None, **gate_options) -> dict:
    """Get current gate status as a dict."""
    now = to_utc(dt) if dt is not None else get_utc_now()
    decision = evaluate_gates(now, **gate_options)

    return {
        "allowed": decision.allowed,
        "session_open": decision.session_open,
        "news_blackout": decision.news_blackout,
        "reason": decision.reason,
        "current_time_utc": now.strftime("%H:%M:%S"),
        "current_date": now.date().isoformat(),
    }
