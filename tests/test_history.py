"""Tests for the suggestion history log."""

from __future__ import annotations

from datetime import datetime

import pytest

from codenudge.history import SuggestionHistory
from codenudge.schemas import HistoryEntry, SuggestionResult


def make_entry(n: int) -> HistoryEntry:
    """Helper to create a distinguishable entry."""
    return HistoryEntry(original=f"code {n}", suggestion=f"better {n}", reason=f"reason {n}")


class TestSuggestionHistory:
    """Tests for capacity, ordering and snapshots."""

    def test_empty(self):
        history = SuggestionHistory()
        assert len(history) == 0
        assert history.entries() == []
        assert history.latest() is None

    def test_insertion_order_most_recent_last(self):
        history = SuggestionHistory()
        entries = [make_entry(i) for i in range(3)]
        for e in entries:
            history.record(e)
        assert history.entries() == entries
        assert history.latest() == entries[-1]

    def test_sixth_entry_evicts_oldest(self):
        """After e1..e6 the log holds e2..e6."""
        history = SuggestionHistory()
        entries = [make_entry(i) for i in range(1, 7)]
        for e in entries:
            history.record(e)
        assert len(history) == 5
        assert history.entries() == entries[1:]

    def test_never_exceeds_capacity(self):
        history = SuggestionHistory(capacity=3)
        for i in range(20):
            history.record(make_entry(i))
            assert len(history) <= 3
        assert [e.original for e in history] == ["code 17", "code 18", "code 19"]

    def test_entries_is_a_snapshot(self):
        history = SuggestionHistory()
        history.record(make_entry(1))
        snapshot = history.entries()
        snapshot.clear()
        assert len(history) == 1

    def test_entries_are_immutable(self):
        entry = make_entry(1)
        with pytest.raises(AttributeError):
            entry.reason = "changed"  # type: ignore[misc]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            SuggestionHistory(capacity=0)

    def test_to_dict(self):
        history = SuggestionHistory()
        history.record(make_entry(1))
        data = history.to_dict()
        assert data[0]["original"] == "code 1"
        assert set(data[0]) == {"original", "suggestion", "reason", "timestamp"}


class TestHistoryEntry:
    def test_from_result(self):
        result = SuggestionResult("const f = () => {}", "arrow", True, "declaration_to_expression")
        entry = HistoryEntry.from_result("function f() {}", result)
        assert entry.original == "function f() {}"
        assert entry.suggestion == "const f = () => {}"
        assert entry.reason == "arrow"

    def test_timestamp_is_iso8601(self):
        entry = make_entry(1)
        parsed = datetime.fromisoformat(entry.timestamp)
        assert parsed.tzinfo is not None
