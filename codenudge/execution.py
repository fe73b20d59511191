"""Client for the remote code execution backend."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .errors import ExecutionError

logger = logging.getLogger(__name__)

DEFAULT_EXECUTE_URL = "http://localhost:5121/api/execute"
GENERIC_FAILURE = "Failed to execute code"


class ExecutionClient:
    """Submits source code to the execution backend and returns its output."""

    def __init__(
        self,
        url: str = DEFAULT_EXECUTE_URL,
        timeout_s: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def execute(self, language: str, source_code: str) -> dict[str, Any]:
        """Run ``source_code`` remotely.

        Args:
            language: Backend language key, e.g. ``"javascript"``.
            source_code: Code to run.

        Returns:
            ``{"run": <backend response>}``.

        Raises:
            ExecutionError: With the backend's ``detail`` message when it
                provides one.
        """
        payload = {"language": language, "sourceCode": source_code}
        logger.debug(f"POST {self.url} language={language} ({len(source_code)} chars)")

        try:
            r = self.session.post(self.url, json=payload, timeout=self.timeout_s)
        except requests.exceptions.RequestException as e:
            logger.error(f"Execution request failed: {e}")
            raise ExecutionError(GENERIC_FAILURE) from e

        if not r.ok:
            raise ExecutionError(_error_detail(r), status_code=r.status_code)

        try:
            return {"run": r.json()}
        except ValueError as e:
            raise ExecutionError(GENERIC_FAILURE, status_code=r.status_code) from e


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return GENERIC_FAILURE
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return GENERIC_FAILURE
