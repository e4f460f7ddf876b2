"""
Notification Service

CONTRACT:
    Input:  formatted alert text
    Output: none (fire-and-forget)

Delivery is best-effort. Missing credentials silently disable alerting.
"""

from fxsignal.services.notifications.formatter import format_alert
from fxsignal.services.notifications.telegram import (
    TelegramNotifier,
    close_notifier,
    get_notifier,
)

__all__ = [
    "TelegramNotifier",
    "close_notifier",
    "format_alert",
    "get_notifier",
]
