"""Rules that add to the snippet rather than restructure it."""

from __future__ import annotations

from .base import Rule, RuleContext
from ..schemas import SuggestionResult

INLINE_COMMENT = "//"

DOC_COMMENT = "// Auto-generated comment: Main logic"

# Identifies our own try/catch wrapper on later evaluations
MARKER_COMMENT = "// Suggestion: added error handling"


class DocumentationRule(Rule):
    """Prepend a documentation comment to uncommented code."""

    @property
    def name(self) -> str:
        return "documentation"

    @property
    def description(self) -> str:
        return "Code has no comments"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        source = ctx.trimmed
        if INLINE_COMMENT in source:
            return None
        return self.rewrite(
            "Added a comment to improve code documentation.",
            f"{DOC_COMMENT}\n{source}",
        )


class ErrorHandlingRule(Rule):
    """Wrap the whole snippet in try/catch with a logging fallback.

    Always fires; it must stay last in the registry.
    """

    @property
    def name(self) -> str:
        return "error_handling"

    @property
    def description(self) -> str:
        return "Code has no error handling"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        wrapped = (
            f"{MARKER_COMMENT}\n"
            "try {\n"
            f"  {ctx.trimmed}\n"
            "} catch (error) {\n"
            "  console.error(error);\n"
            "}"
        )
        return self.rewrite("Added try-catch for robust error handling.", wrapped)
