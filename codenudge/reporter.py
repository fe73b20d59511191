"""Report generation for suggestions and history."""

from __future__ import annotations

import json

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .schemas import HistoryEntry, SuggestionResult


def generate_json_report(result: SuggestionResult) -> str:
    """Generate a JSON report for a suggestion."""
    return json.dumps(result.to_dict(), indent=2)


def generate_text_report(result: SuggestionResult, original: str) -> str:
    """Generate a plain text report.

    Args:
        result: The suggestion to report.
        original: The text the suggestion was computed from.

    Returns:
        Formatted text report.
    """
    lines = []
    lines.append("=" * 70)
    lines.append("                    Code Suggestion")
    lines.append("=" * 70)
    lines.append(f"Rule:    {result.rule}")
    lines.append(f"Applied: {'yes' if result.applied else 'no'}")
    lines.append(f"Reason:  {result.reason}")

    if result.applied:
        lines.append("")
        lines.append("BEFORE")
        lines.append("-" * 70)
        lines.append(original.strip())
        lines.append("")
        lines.append("AFTER")
        lines.append("-" * 70)
        lines.append(result.suggested_text)

    lines.append("=" * 70)
    return "\n".join(lines)


def print_rich_result(
    result: SuggestionResult,
    original: str,
    console: Console | None = None,
    language: str = "javascript",
) -> None:
    """Print a suggestion with syntax highlighting."""
    console = console or Console()

    style = "green" if result.applied else "blue"
    console.print(
        Panel.fit(
            f"[bold]{result.reason}[/bold]\n[dim]rule: {result.rule}[/dim]",
            title="[bold]Code Suggestion[/bold]",
            border_style=style,
        )
    )

    if result.applied:
        console.print("[dim]Before:[/dim]")
        console.print(Syntax(original.strip(), language, line_numbers=True))
        console.print("[dim]After:[/dim]")
        console.print(Syntax(result.suggested_text, language, line_numbers=True))
    console.print()


def format_history(entries: list[HistoryEntry]) -> Table:
    """Build a table of applied suggestions, oldest first."""
    table = Table(title="Suggestion History")
    table.add_column("#", justify="right", style="dim")
    table.add_column("When", style="cyan")
    table.add_column("Reason")
    table.add_column("Size", justify="right")

    for i, entry in enumerate(entries, 1):
        table.add_row(
            str(i),
            entry.timestamp,
            entry.reason,
            f"{len(entry.original)} -> {len(entry.suggestion)}",
        )
    return table
