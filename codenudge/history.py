"""Bounded log of applied suggestions."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .schemas import HistoryEntry

DEFAULT_CAPACITY = 5


class SuggestionHistory:
    """FIFO buffer of the most recent applied suggestions.

    Recording past capacity evicts the oldest entry. Entries are immutable
    and kept in insertion order, most recent last.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> list[HistoryEntry]:
        """Snapshot of the log, oldest first."""
        return list(self._entries)

    def latest(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries())

    def to_dict(self) -> list[dict]:
        return [e.to_dict() for e in self._entries]
