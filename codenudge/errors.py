"""Exceptions raised by codenudge."""

from __future__ import annotations


class CodenudgeError(Exception):
    """Base class for codenudge errors."""


class EditorUnavailableError(CodenudgeError):
    """Raised when no editor handle is available to read from or commit to."""

    def __init__(self, message: str = "Editor is not available. Please ensure the editor is loaded."):
        super().__init__(message)


class ExecutionError(CodenudgeError):
    """Raised when the remote execution backend rejects or fails a run."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
