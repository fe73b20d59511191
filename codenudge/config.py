"""Runtime settings, read from CODENUDGE_* environment variables.

A ``.env`` file is loaded first when present, without overriding
variables already set in the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CODENUDGE_"


@dataclass
class Settings:
    """Configuration for sessions, the CLI and the execution client."""

    # Debounce window before a requested suggestion runs
    quiet_period_ms: int = 500

    # Applied suggestions kept per session
    history_capacity: int = 5

    # Remote execution backend
    execute_url: str = "http://localhost:5121/api/execute"
    execute_timeout_s: float = 30.0

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "Settings":
        """Build settings from the environment.

        Args:
            env_file: Explicit ``.env`` path. Defaults to searching from the
                current directory.

        Raises:
            ValueError: If a numeric variable does not parse.
        """
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        defaults = cls()
        return cls(
            quiet_period_ms=int(_env("QUIET_PERIOD_MS", defaults.quiet_period_ms)),
            history_capacity=int(_env("HISTORY_CAPACITY", defaults.history_capacity)),
            execute_url=_env("EXECUTE_URL", defaults.execute_url),
            execute_timeout_s=float(_env("EXECUTE_TIMEOUT_S", defaults.execute_timeout_s)),
            log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
        )

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING


def _env(name: str, default: object) -> str:
    return os.environ.get(ENV_PREFIX + name, str(default))
