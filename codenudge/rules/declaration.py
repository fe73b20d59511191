"""Rule: function declaration -> arrow function expression.

    function add(a, b) { return a + b; }
    const add = (a, b) => { return a + b; }

    async function load(u) { return fetch(u); }
    const load = async (u) => { return fetch(u); }

Only the first complete declaration is rewritten. The parameter list and
body are carried over verbatim.
"""

from __future__ import annotations

import re

from .base import Rule, RuleContext
from .blocks import match_block, splice
from ..schemas import SuggestionResult

FUNCTION_HEADER = re.compile(
    r"\b(?P<async>async\s+)?function\s+(?P<name>\w+)\s*\((?P<params>[^)]*)\)\s*\{"
)


class DeclarationToExpressionRule(Rule):
    """Convert a named function declaration into a const arrow function."""

    @property
    def name(self) -> str:
        return "declaration_to_expression"

    @property
    def description(self) -> str:
        return "Function declaration can be written as an arrow function"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        source = ctx.trimmed
        match = match_block(FUNCTION_HEADER, source)
        if match is None:
            return None

        name = match.header.group("name")
        params = match.header.group("params")
        prefix = "async " if match.header.group("async") else ""
        replacement = f"const {name} = {prefix}({params}) => {{{match.body}}}"

        return self.rewrite(
            "Converted function declaration to an arrow function for concise, modern JavaScript.",
            splice(source, match, replacement),
        )
