"""Locating brace-delimited blocks after a regex-matched header."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class BlockMatch:
    """A header match together with the balanced block that follows it."""

    header: re.Match[str]
    body: str  # text between the opening and closing brace, verbatim
    start: int  # index of the first header character
    end: int  # index just past the closing brace


def find_closing_brace(text: str, open_index: int) -> int | None:
    """Find the brace that closes the one at ``open_index``.

    Braces are counted textually; braces inside string literals or
    comments are not treated specially.

    Args:
        text: The text to scan.
        open_index: Index of an opening ``{`` in ``text``.

    Returns:
        Index of the matching ``}``, or None if the block never closes.
    """
    depth = 0
    for i in range(open_index, len(text)):
        c = text[i]
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def match_block(header: re.Pattern[str], text: str) -> BlockMatch | None:
    """Return the first header occurrence whose block closes.

    ``header`` must match up to and including the opening brace.

    Args:
        header: Compiled pattern ending in ``{``.
        text: Text to search.

    Returns:
        The first complete match, or None.
    """
    for m in header.finditer(text):
        open_index = m.end() - 1
        close_index = find_closing_brace(text, open_index)
        if close_index is None:
            continue
        return BlockMatch(
            header=m,
            body=text[open_index + 1 : close_index],
            start=m.start(),
            end=close_index + 1,
        )
    return None


def splice(text: str, match: BlockMatch, replacement: str) -> str:
    """Replace the matched region of ``text``, leaving the rest untouched."""
    return text[: match.start] + replacement + text[match.end :]
