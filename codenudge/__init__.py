"""codenudge - rule-based code suggestions applied to a live editor buffer."""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import CodenudgeError, EditorUnavailableError, ExecutionError
from .rules import evaluate
from .schemas import HistoryEntry, Notification, Severity, SuggestionResult
from .session import Outcome, SessionState, SuggestionSession

__all__ = [
    "__version__",
    "CodenudgeError",
    "EditorUnavailableError",
    "ExecutionError",
    "HistoryEntry",
    "Notification",
    "Outcome",
    "SessionState",
    "Severity",
    "SuggestionResult",
    "SuggestionSession",
    "evaluate",
]
