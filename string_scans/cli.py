"""Command line entry point for the string scanning helpers.

Each subcommand runs one analysis and prints the outcome either as a ``rich``
table (default) or as a JSON object. Input text may be passed inline or read
from standard input with ``-``. Because the palindrome search is quadratic,
``--max-length`` (or ``max_length`` in a settings file) caps the accepted
input size.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .character_frequency import (
    count_duplicate_characters,
    first_non_repeated_character,
    is_valid_anagram,
)
from .config import ConfigError, ScanSettings, load_settings
from .kth_largest import RankOutOfRangeError, kth_largest
from .longest_palindromic_substring import find_longest_palindrome
from .longest_unique_substring import find_longest_unique_window
from .symmetric_tree import build_tree_from_level_order, is_symmetric, render_tree

logger = logging.getLogger(__name__)

Report = Dict[str, Any]


class InputTooLongError(ValueError):
    """Raised when CLI input exceeds the configured ``max_length``."""


def enforce_length_cap(text: str, max_length: Optional[int]) -> str:
    """Return *text* unchanged or raise when it is longer than *max_length*."""

    if max_length is not None and len(text) > max_length:
        raise InputTooLongError(
            f"input has {len(text)} characters, limit is {max_length}"
        )
    return text


def _read_text(value: str, stdin: TextIO) -> str:
    if value == "-":
        return stdin.read().rstrip("\n")
    return value


def _parse_level_order_value(token: str) -> Optional[int]:
    if token.lower() in {"null", "none"}:
        return None
    try:
        return int(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"tree values must be integers or 'null', received {token!r}"
        ) from exc


def _palindrome(args: argparse.Namespace, texts: List[str]) -> Report:
    span = find_longest_palindrome(texts[0])
    return {"command": "palindrome", "input": texts[0], **span.to_dict()}


def _unique(args: argparse.Namespace, texts: List[str]) -> Report:
    span = find_longest_unique_window(texts[0])
    return {"command": "unique", "input": texts[0], **span.to_dict()}


def _duplicates(args: argparse.Namespace, texts: List[str]) -> Report:
    return {
        "command": "duplicates",
        "input": texts[0],
        "duplicates": count_duplicate_characters(texts[0]),
    }


def _first_unique(args: argparse.Namespace, texts: List[str]) -> Report:
    return {
        "command": "first-unique",
        "input": texts[0],
        "character": first_non_repeated_character(texts[0]),
    }


def _anagram(args: argparse.Namespace, texts: List[str]) -> Report:
    return {
        "command": "anagram",
        "first": texts[0],
        "second": texts[1],
        "anagram": is_valid_anagram(texts[0], texts[1]),
    }


def _kth_largest(args: argparse.Namespace, texts: List[str]) -> Report:
    return {
        "command": "kth-largest",
        "k": args.k,
        "values": list(args.values),
        "result": kth_largest(args.values, args.k),
    }


def _symmetric(args: argparse.Namespace, texts: List[str]) -> Report:
    tree = build_tree_from_level_order(args.values)
    return {
        "command": "symmetric",
        "values": list(args.values),
        "symmetric": is_symmetric(tree),
        "rendering": render_tree(tree),
    }


Handler = Callable[[argparse.Namespace, List[str]], Report]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="string-scans",
        description="Run deterministic string scanning algorithms from the shell.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON settings file (defaults to $STRING_SCANS_CONFIG when set)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default=None,
        choices=["table", "json"],
        help="Render results as a table (default) or a JSON object.",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Reject text inputs longer than this many characters.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_text_command(
        name: str, handler: Handler, help_text: str, arity: int = 1
    ) -> None:
        sub = subparsers.add_parser(name, help=help_text)
        if arity == 1:
            sub.add_argument("text", help="Input text, or '-' to read stdin")
        else:
            sub.add_argument("first", help="First input text")
            sub.add_argument("second", help="Second input text")
        sub.set_defaults(handler=handler, arity=arity)

    add_text_command("palindrome", _palindrome, "Longest palindromic substring")
    add_text_command("unique", _unique, "Longest substring without repeats")
    add_text_command("duplicates", _duplicates, "Count duplicated characters")
    add_text_command("first-unique", _first_unique, "First non-repeated character")
    add_text_command("anagram", _anagram, "Check whether two texts are anagrams", arity=2)

    kth = subparsers.add_parser("kth-largest", help="Zero-based kth largest integer")
    kth.add_argument("k", type=int, help="Zero-based rank (0 is the maximum)")
    kth.add_argument("values", type=int, nargs="+", help="Integer values")
    kth.set_defaults(handler=_kth_largest, arity=0)

    tree = subparsers.add_parser("symmetric", help="Mirror-symmetry of a binary tree")
    tree.add_argument(
        "values",
        type=_parse_level_order_value,
        nargs="+",
        help="Level-order node values, 'null' for missing children",
    )
    tree.set_defaults(handler=_symmetric, arity=0)
    return parser


def _collect_texts(args: argparse.Namespace, stdin: TextIO) -> List[str]:
    if args.arity == 1:
        return [_read_text(args.text, stdin)]
    if args.arity == 2:
        return [_read_text(args.first, stdin), _read_text(args.second, stdin)]
    return []


def _render_table(report: Mapping[str, Any], console: Console) -> None:
    table = Table(title=f"string-scans {report['command']}")
    table.add_column("field", style="cyan")
    table.add_column("value")
    for key, value in report.items():
        if key == "command":
            continue
        rendered = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
        table.add_row(key, Text(rendered))
    console.print(table)


def emit_report(
    report: Mapping[str, Any], settings: ScanSettings, stream: TextIO
) -> None:
    """Write *report* to *stream* in the configured output format."""

    if settings.output_format == "json":
        stream.write(json.dumps(report, sort_keys=True, ensure_ascii=False) + "\n")
        return
    _render_table(report, Console(file=stream))


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """CLI entry point returning a process exit code."""

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.arity == 2 and args.first == args.second == "-":
        parser.error("only one of the two texts can be read from stdin ('-')")
    logging.basicConfig(level=getattr(logging, args.log_level or "WARNING"))

    try:
        settings = load_settings(
            args.config,
            log_level=args.log_level,
            output_format=args.output_format,
            max_length=args.max_length,
        )
    except (ConfigError, FileNotFoundError) as exc:
        logger.error("Failed to load settings: %s", exc)
        return 1
    logging.getLogger().setLevel(getattr(logging, settings.log_level))

    try:
        texts = [
            enforce_length_cap(text, settings.max_length)
            for text in _collect_texts(args, stdin)
        ]
        report = args.handler(args, texts)
    except (InputTooLongError, RankOutOfRangeError, TypeError) as exc:
        logger.error("Failed to run %s: %s", args.command, exc)
        return 1

    logger.info("Completed %s", args.command)
    emit_report(report, settings, stdout)
    return 0


__all__ = ["InputTooLongError", "emit_report", "enforce_length_cap", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
