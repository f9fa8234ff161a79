"""Command line demo for the binary tree mirror-symmetry checker.

Without arguments the script walks through three built-in trees (mirrored,
lopsided and empty), printing each level-order input, the verdict and the
rendering from ``string_scans.symmetric_tree``. Passing level-order values
checks that tree instead::

    python tree_symmetry.py 1 2 2 null 3 null 3
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

from string_scans.symmetric_tree import (
    build_tree_from_level_order,
    is_symmetric,
    render_tree,
)

LevelOrder = List[Optional[int]]

DEMO_TREES: Tuple[Tuple[str, LevelOrder], ...] = (
    ("Mirrored", [1, 2, 2, 3, 4, 4, 3]),
    ("Lopsided", [1, 2, 2, None, 3, None, 3]),
    ("Empty", []),
)


def _parse_value(token: str) -> Optional[int]:
    if token.lower() in {"null", "none"}:
        return None
    try:
        return int(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer or 'null', got {token!r}") from exc


def format_level_order(values: LevelOrder) -> str:
    """Return *values* as a bracketed list using ``null`` for gaps."""

    return "[" + ", ".join("null" if value is None else str(value) for value in values) + "]"


def describe(name: str, values: LevelOrder) -> List[str]:
    """Return the report lines for one named level-order tree."""

    tree = build_tree_from_level_order(values)
    verdict = "symmetric" if is_symmetric(tree) else "not symmetric"
    return [
        f"{name}: {format_level_order(values)} -> {verdict}",
        render_tree(tree),
    ]


def main(argv: Sequence[str] | None = None) -> None:
    """Print reports for the built-in trees or for the values in *argv*."""

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "values",
        nargs="*",
        type=_parse_value,
        help="Level-order node values, 'null' for missing children",
    )
    args = parser.parse_args(argv)

    cases = [("Input", args.values)] if args.values else list(DEMO_TREES)
    for name, values in cases:
        print("\n".join(describe(name, values)))
        print()


if __name__ == "__main__":
    main()
