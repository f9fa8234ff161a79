"""Sliding-window scanner for the longest run of distinct characters."""

from __future__ import annotations

import logging
from typing import Hashable, Set

from .span import CharSequence, Span, normalise_text

logger = logging.getLogger(__name__)


def find_longest_unique_window(text: CharSequence | None) -> Span:
    """Return the first longest window of *text* with no repeated character.

    ``left`` and ``right`` only move forward, so the scan performs at most
    ``2n`` pointer advances. ``seen`` holds exactly the characters inside
    ``[left, right]`` once the character at ``right`` has been admitted.

    Raises
    ------
    TypeError
        If *text* is not a sequence.
    """

    text = normalise_text(text)
    seen: Set[Hashable] = set()
    left = 0
    best_start, best_length = 0, 0

    for right, char in enumerate(text):
        while char in seen:
            seen.remove(text[left])
            left += 1
        seen.add(char)

        window_length = right - left + 1
        if window_length > best_length:
            best_start, best_length = left, window_length

    logger.debug(
        "Longest unique window in %d characters spans [%d, %d)",
        len(text),
        best_start,
        best_start + best_length,
    )
    return Span(text=text, start=best_start, end=best_start + best_length)


def longest_unique_substring_length(text: CharSequence | None) -> int:
    """Return the length of the longest substring without repeated characters.

    ``""`` and ``None`` both return ``0``.
    """

    return find_longest_unique_window(text).length


__all__ = ["find_longest_unique_window", "longest_unique_substring_length"]
