"""CLI for codenudge.

Usage:
    codenudge suggest <file>
    codenudge suggest <file> --format json
    codenudge suggest <file> --write
    codenudge run <file> --language javascript
    codenudge snippet <language>
    codenudge languages
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .config import Settings
from .editor import InMemoryEditor
from .errors import CodenudgeError
from .execution import ExecutionClient
from .languages import LANGUAGE_VERSIONS, UnsupportedLanguageError, get_snippet
from .notifications import LoggingAnalytics, RichNotifier
from .reporter import format_history, generate_json_report, generate_text_report, print_rich_result
from .rules import evaluate
from .session import Outcome, SuggestionSession

logger = logging.getLogger(__name__)


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        prog="codenudge",
        description="Suggest and apply rule-based rewrites to code snippets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Show the suggestion for a file
    codenudge suggest app.js

    # Read from stdin, print JSON
    cat app.js | codenudge suggest - --format json

    # Apply suggestions to the file, three rounds
    codenudge suggest app.js --write --passes 3

    # Run a file on the execution backend
    codenudge run app.js --language javascript
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load settings from this .env file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Suggest a rewrite for a file",
        description="Evaluate a snippet and show (or apply) the suggested rewrite",
    )
    suggest_parser.add_argument("file", help="Source file, or - for stdin")
    suggest_parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json", "rich"],
        default="rich",
        help="Output format (default: rich)",
    )
    suggest_parser.add_argument(
        "--write",
        "-w",
        action="store_true",
        help="Apply the suggestion to the file",
    )
    suggest_parser.add_argument(
        "--passes",
        type=int,
        default=1,
        help="Number of suggestion rounds with --write (default: 1)",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Run a file on the execution backend",
    )
    run_parser.add_argument("file", type=Path, help="Source file to run")
    run_parser.add_argument(
        "--language",
        "-l",
        required=True,
        help="Backend language key",
    )

    snippet_parser = subparsers.add_parser(
        "snippet",
        help="Print the starter snippet for a language",
    )
    snippet_parser.add_argument("language", help="Language key")

    subparsers.add_parser("languages", help="List supported languages")

    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 1

    try:
        settings = Settings.from_env(parsed.env_file)
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else settings.log_level_value,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if parsed.command == "suggest":
        return cmd_suggest(parsed, settings)
    if parsed.command == "run":
        return cmd_run(parsed, settings)
    if parsed.command == "snippet":
        return cmd_snippet(parsed)
    if parsed.command == "languages":
        return cmd_languages()

    return 0


def cmd_suggest(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the suggest command."""
    if args.write and args.file == "-":
        print("Error: --write needs a file, not stdin", file=sys.stderr)
        return 1
    if args.passes < 1:
        print("Error: --passes must be at least 1", file=sys.stderr)
        return 1

    if args.file == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1
        text = path.read_text(encoding="utf-8")

    if args.write:
        return asyncio.run(_write_suggestions(Path(args.file), text, args.passes, settings))

    result = evaluate(text)
    if args.format == "json":
        print(generate_json_report(result))
    elif args.format == "text":
        print(generate_text_report(result, text))
    else:  # rich
        print_rich_result(result, text)
    return 0


async def _write_suggestions(path: Path, text: str, passes: int, settings: Settings) -> int:
    editor = InMemoryEditor(text)
    console = Console(stderr=True)
    session = SuggestionSession.from_settings(
        lambda: editor, RichNotifier(console), LoggingAnalytics(), settings
    )

    for i in range(passes):
        session.request_suggestion()
        outcome = await session.wait()
        logger.debug(f"Pass {i + 1}/{passes}: {outcome}")
        if outcome is Outcome.ERROR:
            return 1
        if outcome is not Outcome.APPLIED:
            break

    if len(session.history):
        path.write_text(editor.text, encoding="utf-8")
        console.print(format_history(session.history.entries()))
    return 0


def cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the run command."""
    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1
    if args.language not in LANGUAGE_VERSIONS:
        print(f"Error: {UnsupportedLanguageError(args.language)}", file=sys.stderr)
        return 1

    client = ExecutionClient(settings.execute_url, settings.execute_timeout_s)
    try:
        response = client.execute(args.language, args.file.read_text(encoding="utf-8"))
    except CodenudgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run = response["run"]
    if isinstance(run, dict) and "output" in run:
        print(run["output"], end="" if str(run["output"]).endswith("\n") else "\n")
    else:
        print(json.dumps(run, indent=2))
    return 0


def cmd_snippet(args: argparse.Namespace) -> int:
    """Handle the snippet command."""
    try:
        print(get_snippet(args.language), end="")
    except UnsupportedLanguageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_languages() -> int:
    """Handle the languages command."""
    for language, version in LANGUAGE_VERSIONS.items():
        print(f"  {language:<12} {version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
