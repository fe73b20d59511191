"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from codenudge.editor import InMemoryEditor
from codenudge.notifications import AnalyticsSink, NotificationSink
from codenudge.schemas import Notification


class RecordingNotifier(NotificationSink):
    """Keeps every notification it receives."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification:
        return self.notifications[-1]


class RecordingAnalytics(AnalyticsSink):
    """Keeps every tracked event as (name, payload)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def track(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()


@pytest.fixture
def editor() -> InMemoryEditor:
    """Editor with atomic edits, holding a plain function declaration."""
    return InMemoryEditor("function add(a, b) { return a + b; }")


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate os.environ without CODENUDGE_* variables.

    load_dotenv writes into os.environ, so the whole mapping is swapped
    for a copy that is discarded after the test.
    """
    import os

    env = {k: v for k, v in os.environ.items() if not k.startswith("CODENUDGE_")}
    monkeypatch.setattr(os, "environ", env)
    return env
