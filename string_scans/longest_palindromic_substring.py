"""Longest palindromic substring solver.

This module implements the expand-around-center strategy for locating the
longest palindromic contiguous span of a character sequence. Every one of the
``2n - 1`` centers is visited in increasing index order (the on-character
center before the between-character center at each index) and the best span is
only replaced by a strictly longer candidate. The first maximal palindrome in
scan order therefore wins, which makes the result deterministic: ``"babad"``
always yields ``"bab"``.

The solver is total. Empty or absent input produces an empty span and any
non-empty input yields at least a single character.
"""

from __future__ import annotations

import logging

from .span import CharSequence, Span, normalise_text

logger = logging.getLogger(__name__)


def expand_around_center(text: CharSequence, left: int, right: int) -> int:
    """Return the length of the palindrome grown from a center.

    Parameters
    ----------
    text:
        Sequence to inspect.
    left, right:
        Starting indices for the expansion. When *left == right* the expansion
        considers odd-length palindromes, when *right == left + 1* it considers
        even-length palindromes.

    The loop overshoots by one position on each side before it fails, hence
    the ``right - left - 1`` result.
    """

    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return right - left - 1


def find_longest_palindrome(text: CharSequence | None) -> Span:
    """Return the span of the longest palindromic substring of *text*.

    The search runs in O(n^2) time with O(1) extra space. Ties between
    maximal palindromes resolve to the one with the smallest start index.

    Raises
    ------
    TypeError
        If *text* is not a sequence.
    """

    text = normalise_text(text)
    if not text:
        return Span(text=text, start=0, end=0)

    best_start, best_length = 0, 1
    for center in range(len(text)):
        odd_length = expand_around_center(text, center, center)
        even_length = expand_around_center(text, center, center + 1)
        length = max(odd_length, even_length)
        if length > best_length:
            best_length = length
            best_start = center - (length - 1) // 2

    logger.debug(
        "Longest palindrome in %d characters spans [%d, %d)",
        len(text),
        best_start,
        best_start + best_length,
    )
    return Span(text=text, start=best_start, end=best_start + best_length)


def longest_palindromic_substring(text: CharSequence | None) -> CharSequence:
    """Return the longest palindromic substring contained in *text*.

    ``""`` and ``None`` both return ``""``.
    """

    return find_longest_palindrome(text).value


__all__ = [
    "expand_around_center",
    "find_longest_palindrome",
    "longest_palindromic_substring",
]
