"""Tests for the remote execution client."""

from __future__ import annotations

import pytest
import requests

from codenudge.errors import ExecutionError
from codenudge.execution import GENERIC_FAILURE, ExecutionClient

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int, body=_NO_JSON):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._body is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    """Stands in for requests.Session, recording posted payloads."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.posts: list[dict] = []

    def post(self, url, json=None, timeout=None):
        self.posts.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def make_client(session: FakeSession) -> ExecutionClient:
    return ExecutionClient("http://backend/api/execute", timeout_s=5, session=session)


class TestExecutionClient:
    def test_success_wraps_output(self):
        session = FakeSession(FakeResponse(200, {"output": "Hello\n", "stderr": ""}))
        result = make_client(session).execute("javascript", "console.log('Hello')")

        assert result == {"run": {"output": "Hello\n", "stderr": ""}}
        assert session.posts == [
            {
                "url": "http://backend/api/execute",
                "json": {"language": "javascript", "sourceCode": "console.log('Hello')"},
                "timeout": 5,
            }
        ]

    def test_backend_detail_is_surfaced(self):
        session = FakeSession(FakeResponse(400, {"detail": "Unsupported language: cobol"}))
        with pytest.raises(ExecutionError, match="Unsupported language: cobol") as exc_info:
            make_client(session).execute("cobol", "DISPLAY 'HI'.")
        assert exc_info.value.status_code == 400

    def test_error_without_detail(self):
        session = FakeSession(FakeResponse(500, {"message": "boom"}))
        with pytest.raises(ExecutionError) as exc_info:
            make_client(session).execute("python", "print(1)")
        assert str(exc_info.value) == GENERIC_FAILURE

    def test_error_with_non_json_body(self):
        session = FakeSession(FakeResponse(502))
        with pytest.raises(ExecutionError, match=GENERIC_FAILURE):
            make_client(session).execute("python", "print(1)")

    def test_connection_error(self):
        session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(ExecutionError, match=GENERIC_FAILURE) as exc_info:
            make_client(session).execute("python", "print(1)")
        assert exc_info.value.status_code is None

    def test_success_with_invalid_json(self):
        session = FakeSession(FakeResponse(200))
        with pytest.raises(ExecutionError):
            make_client(session).execute("python", "print(1)")
