"""Base classes for the rule engine."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..schemas import SuggestionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Context provided to rules for a single evaluation.

    Rules see the raw text as typed and its stripped form. Rewrites are
    built from ``trimmed``; no-op results must hand back ``text`` unchanged.
    """

    text: str

    @property
    def trimmed(self) -> str:
        return self.text.strip()

    def unchanged(self, reason: str, rule: str) -> SuggestionResult:
        """Build a no-op result that returns the input verbatim."""
        return SuggestionResult(
            suggested_text=self.text,
            reason=reason,
            applied=False,
            rule=rule,
        )


class Rule(ABC):
    """Base class for rewrite rules.

    A rule is a guard plus a transform: ``check`` returns None when the
    guard does not hold, otherwise the result of the transform.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name for this rule."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this rule does."""
        ...

    @abstractmethod
    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        """Decide whether this rule fires for the given text.

        Args:
            ctx: Rule context holding the text being evaluated.

        Returns:
            A SuggestionResult if the rule fires, or None to defer to the
            next rule in priority order.
        """
        ...

    def rewrite(self, reason: str, suggested_text: str) -> SuggestionResult:
        """Build an applied result attributed to this rule."""
        return SuggestionResult(
            suggested_text=suggested_text,
            reason=reason,
            applied=True,
            rule=self.name,
        )


class RuleRegistry:
    """Ordered collection of rules evaluated first-match-wins.

    Registration order is priority order. Adding or reordering rules is a
    change to the registry, not to the evaluation loop.
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def register(self, rule: Rule) -> None:
        """Append a rule at the lowest priority.

        Args:
            rule: The rule instance to register.
        """
        self._rules.append(rule)

    def get_rules(self) -> list[Rule]:
        """Get all registered rules in priority order."""
        return list(self._rules)

    def evaluate(self, text: str) -> SuggestionResult:
        """Run the rules against ``text`` and return the first outcome.

        Args:
            text: Source text taken from the editor. May be empty.

        Returns:
            The result of the highest-priority rule that fires. If none
            fires, an unchanged result with rule name ``"none"``.
        """
        ctx = RuleContext(text=text)

        for rule in self._rules:
            result = rule.check(ctx)
            if result is not None:
                logger.debug(f"Rule {rule.name} fired (applied={result.applied})")
                return result

        return ctx.unchanged("No rule matched.", "none")
