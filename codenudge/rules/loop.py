"""Rule: counted for loop -> forEach callback.

    for (let i = 0; i < items.length; i++) { total += items[i]; }
    items.forEach((i) => { total += items[i]; })
"""

from __future__ import annotations

import re

from .base import Rule, RuleContext
from .blocks import match_block, splice
from ..schemas import SuggestionResult

# The loop variable must be the same identifier in all three clauses
COUNTED_LOOP_HEADER = re.compile(
    r"\bfor\s*\(\s*let\s+(?P<var>\w+)\s*=\s*0\s*;"
    r"\s*(?P=var)\s*<\s*(?P<collection>\w+)\.length\s*;"
    r"\s*(?P=var)\+\+\s*\)\s*\{"
)


class LoopToIteratorRule(Rule):
    """Replace a canonical counted loop with an iteration callback."""

    @property
    def name(self) -> str:
        return "loop_to_iterator"

    @property
    def description(self) -> str:
        return "Counted for loop can be written as forEach"

    def check(self, ctx: RuleContext) -> SuggestionResult | None:
        source = ctx.trimmed
        match = match_block(COUNTED_LOOP_HEADER, source)
        if match is None:
            return None

        var = match.header.group("var")
        collection = match.header.group("collection")
        replacement = f"{collection}.forEach(({var}) => {{{match.body}}})"

        return self.rewrite(
            "Replaced for loop with forEach for improved readability.",
            splice(source, match, replacement),
        )
