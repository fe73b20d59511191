"""Rule engine for code suggestions.

Rules are evaluated in registration order and the first one to fire
decides the result:

1. Empty input -> no change
2. Try/catch already present -> no change
3. Function declaration -> arrow function
4. Counted for loop -> forEach
5. No comments -> documentation comment
6. Otherwise -> try/catch wrapper
"""

from __future__ import annotations

from .base import Rule, RuleContext, RuleRegistry
from .declaration import DeclarationToExpressionRule
from .guards import EmptyInputRule, GuardPresentRule
from .loop import LoopToIteratorRule
from .wrap import DocumentationRule, ErrorHandlingRule
from ..schemas import SuggestionResult

# Register all rules, highest priority first
_registry = RuleRegistry()
_registry.register(EmptyInputRule())
_registry.register(GuardPresentRule())
_registry.register(DeclarationToExpressionRule())
_registry.register(LoopToIteratorRule())
_registry.register(DocumentationRule())
_registry.register(ErrorHandlingRule())


def get_registry() -> RuleRegistry:
    """Get the global rule registry."""
    return _registry


def evaluate(text: str) -> SuggestionResult:
    """Evaluate a snippet and return the suggestion for it.

    This is the main entry point for the rule engine. It is pure: the same
    text always yields the same result and nothing else is touched.

    Args:
        text: Source text from the editor. May be empty.

    Returns:
        The suggestion decided by the highest-priority matching rule.
    """
    return _registry.evaluate(text)


__all__ = [
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "get_registry",
    "evaluate",
    "EmptyInputRule",
    "GuardPresentRule",
    "DeclarationToExpressionRule",
    "LoopToIteratorRule",
    "DocumentationRule",
    "ErrorHandlingRule",
]
