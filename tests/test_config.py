"""Tests for settings loading."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import pytest

from codenudge.config import Settings
from codenudge.editor import InMemoryEditor
from codenudge.session import Outcome, SuggestionSession


def test_defaults(clean_env, tmp_path: Path):
    settings = Settings.from_env(tmp_path / "missing.env")
    assert settings == Settings()
    assert settings.quiet_period_ms == 500
    assert settings.history_capacity == 5
    assert settings.execute_url == "http://localhost:5121/api/execute"


def test_environment_variables(clean_env, tmp_path: Path):
    clean_env["CODENUDGE_QUIET_PERIOD_MS"] = "250"
    clean_env["CODENUDGE_EXECUTE_URL"] = "http://runner:9000/run"
    clean_env["CODENUDGE_LOG_LEVEL"] = "debug"

    settings = Settings.from_env(tmp_path / "missing.env")

    assert settings.quiet_period_ms == 250
    assert settings.execute_url == "http://runner:9000/run"
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_env_file(clean_env, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("CODENUDGE_HISTORY_CAPACITY=3\nCODENUDGE_EXECUTE_TIMEOUT_S=2.5\n")

    settings = Settings.from_env(env_file)

    assert settings.history_capacity == 3
    assert settings.execute_timeout_s == 2.5


def test_environment_beats_env_file(clean_env, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("CODENUDGE_HISTORY_CAPACITY=3\n")
    clean_env["CODENUDGE_HISTORY_CAPACITY"] = "4"

    assert Settings.from_env(env_file).history_capacity == 4


def test_invalid_number(clean_env, tmp_path: Path):
    clean_env["CODENUDGE_QUIET_PERIOD_MS"] = "soon"
    with pytest.raises(ValueError):
        Settings.from_env(tmp_path / "missing.env")


def test_unknown_log_level_falls_back():
    assert Settings(log_level="LOUD").log_level_value == logging.WARNING


def test_session_uses_configured_timing(clean_env, tmp_path: Path, notifier, analytics):
    """Debounce window and history size come from the environment."""
    clean_env["CODENUDGE_QUIET_PERIOD_MS"] = "30"
    clean_env["CODENUDGE_HISTORY_CAPACITY"] = "2"
    editor = InMemoryEditor("function add(a, b) { return a + b; }")

    session = SuggestionSession.from_settings(
        lambda: editor, notifier, analytics, Settings.from_env(tmp_path / "missing.env")
    )

    assert session.quiet_period_ms == 30
    assert session.history.capacity == 2

    async def scenario():
        session.request_suggestion()
        await asyncio.sleep(0.01)
        assert session.pending is True
        assert editor.text == "function add(a, b) { return a + b; }"
        return await session.wait()

    assert asyncio.run(scenario()) is Outcome.APPLIED
    assert editor.text == "const add = (a, b) => { return a + b; }"
