"""Suggestion session: debounce, read, evaluate, apply, record.

One session drives one editor. Each cycle moves through

    IDLE -> DEBOUNCING -> READING -> EVALUATING -> (NO_OP | APPLYING) -> IDLE

and always ends back in IDLE, whatever happened along the way.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from enum import Enum
from typing import Awaitable, Callable, Union

from .config import Settings
from .editor import EditorCapability, apply_suggestion
from .errors import EditorUnavailableError
from .history import DEFAULT_CAPACITY, SuggestionHistory
from .notifications import AnalyticsSink, NotificationSink
from .rules import evaluate
from .scheduler import schedule
from .schemas import HistoryEntry, Notification, Severity, SuggestionResult

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD_MS = 500

# Toast durations
SHORT_DURATION_MS = 4000
LONG_DURATION_MS = 6000

EVENT_APPLIED = "suggestion_applied"
EVENT_ERROR = "suggestion_error"

# Returns the editor currently mounted in the host, or None
EditorRef = Callable[[], Union[EditorCapability, None]]


class SessionState(Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    READING = "reading"
    EVALUATING = "evaluating"
    NO_OP = "no_op"
    APPLYING = "applying"


class Outcome(Enum):
    """How a single cycle ended."""

    APPLIED = "applied"
    NO_CHANGE = "no_change"
    EMPTY_INPUT = "empty_input"
    ERROR = "error"
    BUSY = "busy"


class SuggestionSession:
    """Drives suggestions for a single editor.

    The editor is reached through ``editor_ref`` on every cycle and never
    stored, so the host may swap or unmount it between cycles. The history
    log belongs to the session and is only written by ``run_once``.
    """

    def __init__(
        self,
        editor_ref: EditorRef,
        notifier: NotificationSink,
        analytics: AnalyticsSink,
        quiet_period_ms: float = DEFAULT_QUIET_PERIOD_MS,
        history_capacity: int = DEFAULT_CAPACITY,
        engine: Callable[[str], SuggestionResult] = evaluate,
    ):
        self._editor_ref = editor_ref
        self._notifier = notifier
        self._analytics = analytics
        self._engine = engine
        self.history = SuggestionHistory(history_capacity)
        self.state = SessionState.IDLE
        self.last_outcome: Outcome | None = None

        # Applied suggestions over the session's lifetime; the history log is capped
        self.applied_count = 0

        self._busy = False
        self._rerun = False
        self._active_task: asyncio.Task | None = None
        self._debouncer = schedule(self._on_quiet, quiet_period_ms)

    @classmethod
    def from_settings(
        cls,
        editor_ref: EditorRef,
        notifier: NotificationSink,
        analytics: AnalyticsSink,
        settings: Settings,
    ) -> "SuggestionSession":
        """Build a session using the configured quiet period and history size."""
        return cls(
            editor_ref,
            notifier,
            analytics,
            quiet_period_ms=settings.quiet_period_ms,
            history_capacity=settings.history_capacity,
        )

    @property
    def busy(self) -> bool:
        """True while a cycle is past debouncing and not yet finished."""
        return self._busy

    @property
    def pending(self) -> bool:
        """True while a request is waiting, either on its timer or on a running cycle."""
        return self._debouncer.pending or self._rerun

    @property
    def quiet_period_ms(self) -> float:
        return self._debouncer.quiet_period_ms

    def request_suggestion(self) -> None:
        """Ask for a suggestion once input settles.

        Safe to call at any time, including mid-cycle; the call is
        rescheduled and never starts a second concurrent evaluation. Must
        be called on a running event loop.
        """
        if self.state is SessionState.IDLE:
            self._transition(SessionState.DEBOUNCING)
        self._debouncer()

    def cancel(self) -> bool:
        """Drop a pending request. A cycle already reading or applying runs on."""
        cancelled = self._debouncer.cancel() or self._rerun
        self._rerun = False
        if cancelled and not self._busy:
            self._transition(SessionState.IDLE)
        return cancelled

    async def wait(self) -> Outcome | None:
        """Wait until no request is pending and no cycle is running.

        Requests deferred behind a running cycle are waited for as well.

        Returns:
            The outcome of the last finished cycle, or None if none ran.
        """
        while True:
            if self._debouncer.pending:
                await asyncio.sleep(self._debouncer.quiet_period_ms / 1000.0)
                continue
            task = self._active_task if self._busy else self._debouncer.last_task
            if task is None or task.done() or task is asyncio.current_task():
                break
            await task
        return self.last_outcome

    def _on_quiet(self) -> Awaitable[Outcome] | None:
        if self._busy:
            # Re-armed when the running cycle finishes
            logger.debug("Deferring request until the running cycle finishes")
            self._rerun = True
            return None
        return self.run_once()

    async def run_once(self) -> Outcome:
        """Run one read-evaluate-apply cycle immediately.

        Returns:
            The outcome of the cycle, or ``Outcome.BUSY`` if another cycle
            is still in progress.
        """
        if self._busy:
            logger.debug("Suggestion cycle already in progress; skipping")
            return Outcome.BUSY

        self._busy = True
        self._active_task = asyncio.current_task()
        try:
            outcome = await self._cycle()
        finally:
            self._busy = False
            self._active_task = None
            if self._rerun:
                self._rerun = False
                self._debouncer()
            self._transition(
                SessionState.DEBOUNCING if self._debouncer.pending else SessionState.IDLE
            )

        self.last_outcome = outcome
        return outcome

    async def _cycle(self) -> Outcome:
        try:
            self._transition(SessionState.READING)
            editor = self._editor_ref()
            if editor is None:
                raise EditorUnavailableError()

            text = editor.get_current_text()
            if inspect.isawaitable(text):
                text = await text
            text = text or ""

            if not text.strip():
                self._notify(
                    "No Code",
                    "Please enter some code to get a suggestion.",
                    Severity.WARNING,
                    SHORT_DURATION_MS,
                )
                return Outcome.EMPTY_INPUT

            self._transition(SessionState.EVALUATING)
            result = self._engine(text)

            if not result.applied:
                self._transition(SessionState.NO_OP)
                self._notify("No Changes Applied", result.reason, Severity.INFO, LONG_DURATION_MS)
                return Outcome.NO_CHANGE

            self._transition(SessionState.APPLYING)
            # Borrowed again for the commit; the read may have suspended
            atomic = apply_suggestion(self._editor_ref(), result.suggested_text)
            self.history.record(HistoryEntry.from_result(text, result))
            self.applied_count += 1

            description = f"Reason: {result.reason}"
            if atomic:
                description += " Press Ctrl+Z to undo."
            self._notify("Suggestion Applied", description, Severity.SUCCESS, LONG_DURATION_MS)
            self._analytics.track(
                EVENT_APPLIED,
                {
                    "suggestion_type": result.reason,
                    "rule": result.rule,
                    "code_length": len(text),
                    "history_count": self.applied_count,
                },
            )
            logger.info(f"Applied suggestion from rule {result.rule}")
            return Outcome.APPLIED

        except EditorUnavailableError as e:
            logger.warning(str(e))
            self._report_error(str(e))
            return Outcome.ERROR
        except Exception as e:
            logger.exception("Suggestion cycle failed")
            self._report_error(str(e) or "Failed to apply suggestion. Please try again.")
            return Outcome.ERROR

    def _report_error(self, message: str) -> None:
        self._notify("Error", message, Severity.ERROR, SHORT_DURATION_MS)
        self._analytics.track(EVENT_ERROR, {"error": message})

    def _notify(self, title: str, description: str, severity: Severity, duration_ms: int) -> None:
        self._notifier.notify(
            Notification(
                title=title,
                description=description,
                severity=severity,
                duration_ms=duration_ms,
            )
        )

    def _transition(self, state: SessionState) -> None:
        if state is not self.state:
            logger.debug(f"Session {self.state.value} -> {state.value}")
            self.state = state
