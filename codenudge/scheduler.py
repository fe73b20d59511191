"""Debounced invocation of a trigger on the running asyncio loop.

Each call re-arms a single timer; only the last call in a burst runs the
trigger, once the quiet period has passed without another call. Nothing
is queued.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Callable wrapper that coalesces bursts of calls into one.

    The pending timer is a single slot: a new call cancels whatever is
    armed. If the trigger returns an awaitable, it is run as a task and the
    task is kept on ``last_task``.
    """

    def __init__(self, trigger: Callable[[], Any], quiet_period_ms: float):
        if quiet_period_ms < 0:
            raise ValueError(f"quiet_period_ms must be >= 0, got {quiet_period_ms}")
        self._trigger = trigger
        self.quiet_period_ms = quiet_period_ms
        self._handle: asyncio.TimerHandle | None = None
        self.last_task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        """Whether a call is armed and has not fired yet."""
        return self._handle is not None

    def __call__(self) -> None:
        """Arm the timer, superseding any pending call.

        Must be called from code running on an asyncio event loop.
        """
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            logger.debug("Superseding pending invocation")
            self._handle.cancel()
        self._handle = loop.call_later(self.quiet_period_ms / 1000.0, self._fire)

    def cancel(self) -> bool:
        """Cancel the pending call, if any.

        Returns:
            True if a pending call was cancelled.
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self) -> None:
        self._handle = None
        result = self._trigger()
        if inspect.isawaitable(result):
            self.last_task = asyncio.ensure_future(result)


def schedule(trigger: Callable[[], Any], quiet_period_ms: float) -> Debouncer:
    """Wrap ``trigger`` so it runs once per quiet window.

    Args:
        trigger: Zero-argument callable, sync or returning an awaitable.
        quiet_period_ms: Idle time after the last call before running.

    Returns:
        A Debouncer; call it to request an invocation.
    """
    return Debouncer(trigger, quiet_period_ms)
