"""Rules that stop evaluation without rewriting anything.

- Empty or whitespace-only input
- Input that already carries error handling, either hand-written or
  inserted by a previous suggestion. Without this guard, repeated
  invocations would keep nesting try/catch wrappers.
"""

from __future__ import annotations

import re

from .base import Rule, RuleContext
from .wrap import MARKER_COMMENT
from ..schemas import SuggestionResult

TRY_BLOCK_PATTERN = re.compile(r"\btry\s*\{")


class EmptyInputRule(Rule):
    """Refuse to rewrite empty input."""

    @property
    def name(self) -> str:
        return "empty_input"

    @property
    def description(self) -> str:
        return "Nothing to suggest for empty input"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        if ctx.trimmed:
            return None
        return ctx.unchanged("No code provided.", self.name)


class GuardPresentRule(Rule):
    """Refuse to rewrite code that already has a try/catch guard."""

    @property
    def name(self) -> str:
        return "guard_present"

    @property
    def description(self) -> str:
        return "Error handling is already present"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        trimmed = ctx.trimmed
        if MARKER_COMMENT in trimmed or TRY_BLOCK_PATTERN.search(trimmed):
            return ctx.unchanged(
                "Try-catch already present; no further error handling added.",
                self.name,
            )
        return None
