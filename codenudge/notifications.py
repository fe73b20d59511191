"""Outbound ports for user notifications and analytics events.

Delivery is up to the host. The implementations here print notifications
to a rich console and write analytics events to the log.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from rich.console import Console
from rich.panel import Panel

from .schemas import Notification, Severity

logger = logging.getLogger(__name__)

SEVERITY_STYLES = {
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
}


class NotificationSink(ABC):
    @abstractmethod
    def notify(self, notification: Notification) -> None:
        ...


class AnalyticsSink(ABC):
    @abstractmethod
    def track(self, event: str, payload: dict[str, Any]) -> None:
        ...


class RichNotifier(NotificationSink):
    """Render notifications as panels on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def notify(self, notification: Notification) -> None:
        style = SEVERITY_STYLES.get(notification.severity, "white")
        self.console.print(
            Panel.fit(
                notification.description,
                title=f"[bold]{notification.title}[/bold]",
                border_style=style,
            )
        )


class LoggingAnalytics(AnalyticsSink):
    """Write analytics events to the log at INFO level."""

    def track(self, event: str, payload: dict[str, Any]) -> None:
        logger.info(f"Analytics: {event} {payload}")
