"""Editor capability and the bridge that commits suggestions to it.

The editor buffer belongs to the host. Code here borrows a handle for a
single read or commit and never keeps it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import EditorUnavailableError

logger = logging.getLogger(__name__)

# Name of the undo transaction a suggestion is committed under
EDIT_TRANSACTION = "codenudge-suggestion"


class EditorCapability(ABC):
    """What the core needs from a host editor."""

    @property
    @abstractmethod
    def supports_atomic_edits(self) -> bool:
        """Whether commits can be recorded as a single undo step."""
        ...

    @abstractmethod
    def get_current_text(self) -> str:
        """Return the full buffer content.

        Hosts whose buffer lives behind an async boundary may return an
        awaitable resolving to the text instead; the session awaits it.
        """
        ...

    @abstractmethod
    def commit_text(self, text: str, atomic: bool, transaction: str | None = None) -> None:
        """Replace the full buffer content.

        Args:
            text: New buffer content.
            atomic: Record the replacement as one undoable edit. Only
                meaningful when ``supports_atomic_edits`` is True.
            transaction: Name of the undo transaction for atomic edits.
        """
        ...

    @abstractmethod
    def focus(self) -> None:
        """Give input focus back to the editor."""
        ...


def apply_suggestion(editor: EditorCapability | None, suggested_text: str) -> bool:
    """Commit ``suggested_text`` as the editor's new content.

    With atomic edit support, the whole buffer is replaced in one named
    transaction so a single undo reverts it, and focus returns to the
    editor. Without it, the buffer is replaced and undo is left to the
    host's own history; no undo step is synthesized here.

    Args:
        editor: Borrowed editor handle, or None if none is available.
        suggested_text: Text to commit.

    Returns:
        True if the commit was atomic (undoable in one step).

    Raises:
        EditorUnavailableError: If ``editor`` is None.
    """
    if editor is None:
        raise EditorUnavailableError()

    if editor.supports_atomic_edits:
        editor.commit_text(suggested_text, atomic=True, transaction=EDIT_TRANSACTION)
        editor.focus()
        return True

    logger.warning("Editor lacks atomic edits; undo is left to the host's history")
    editor.commit_text(suggested_text, atomic=False)
    return False


@dataclass(frozen=True)
class UndoStep:
    transaction: str | None
    previous_text: str


class InMemoryEditor(EditorCapability):
    """A plain string buffer with an undo stack.

    Atomic commits push one undo step. Non-atomic commits behave like a
    host ``setValue``: the buffer is replaced and the undo stack is reset.
    """

    def __init__(self, text: str = "", atomic_edits: bool = True):
        self.text = text
        self._atomic_edits = atomic_edits
        self._undo_stack: list[UndoStep] = []
        self.focused = False

    @property
    def supports_atomic_edits(self) -> bool:
        return self._atomic_edits

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    def get_current_text(self) -> str:
        return self.text

    def commit_text(self, text: str, atomic: bool, transaction: str | None = None) -> None:
        if atomic and self._atomic_edits:
            self._undo_stack.append(UndoStep(transaction, self.text))
        else:
            self._undo_stack.clear()
        self.text = text

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def undo(self) -> bool:
        """Revert the most recent atomic commit.

        Returns:
            False if there is nothing to undo.
        """
        if not self._undo_stack:
            return False
        step = self._undo_stack.pop()
        self.text = step.previous_text
        return True
