"""Data models for suggestions, history and notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity levels accepted by a notification sink."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of evaluating a snippet against the rule chain.

    When ``applied`` is False, ``suggested_text`` is the input text verbatim.
    """

    suggested_text: str
    reason: str
    applied: bool

    # Short machine name of the rule that decided the outcome
    rule: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggested_text": self.suggested_text,
            "reason": self.reason,
            "applied": self.applied,
            "rule": self.rule,
        }


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class HistoryEntry:
    """An applied suggestion, kept in the session's history log."""

    original: str
    suggestion: str
    reason: str
    timestamp: str = field(default_factory=_utc_now_iso)

    @classmethod
    def from_result(cls, original: str, result: SuggestionResult) -> "HistoryEntry":
        return cls(
            original=original,
            suggestion=result.suggested_text,
            reason=result.reason,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "suggestion": self.suggestion,
            "reason": self.reason,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class Notification:
    """A user-facing message emitted by the suggestion session."""

    title: str
    description: str
    severity: Severity
    duration_ms: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "duration_ms": self.duration_ms,
        }
