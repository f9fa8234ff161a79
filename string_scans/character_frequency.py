"""Character frequency helpers: duplicate counting, first unique, anagrams.

Every helper builds an explicit character -> count mapping in one forward pass.
Matching is strictly case-sensitive and no normalisation is applied, so
``"Listen"`` and ``"silent"`` are not anagrams. Absent or empty input maps to a
zero/false/empty default instead of raising.
"""

from __future__ import annotations

from typing import Dict, Hashable, Optional

from .span import CharSequence, normalise_text

CharacterCounts = Dict[Hashable, int]


def character_counts(text: CharSequence | None) -> CharacterCounts:
    """Return a mapping from each character of *text* to its occurrence count.

    The mapping preserves first-occurrence order.
    """

    counts: CharacterCounts = {}
    for char in normalise_text(text):
        counts[char] = counts.get(char, 0) + 1
    return counts


def count_duplicate_characters(text: CharSequence | None) -> int:
    """Return how many distinct characters occur more than once in *text*."""

    duplicates = 0
    for count in character_counts(text).values():
        if count > 1:
            duplicates += 1
    return duplicates


def first_non_repeated_character(text: CharSequence | None) -> Optional[Hashable]:
    """Return the first character of *text* that occurs exactly once.

    ``None`` is returned for empty input and when every character repeats.
    """

    for char, count in character_counts(text).items():
        if count == 1:
            return char
    return None


def _counts_match(first: CharacterCounts, second: CharacterCounts) -> bool:
    if len(first) != len(second):
        return False
    for char, count in first.items():
        if second.get(char) != count:
            return False
    return True


def is_valid_anagram(
    first: CharSequence | None, second: CharSequence | None
) -> bool:
    """Return ``True`` when *first* and *second* are anagrams of each other.

    ``None`` on either side is never an anagram. Two empty strings are.
    """

    if first is None or second is None:
        return False
    first = normalise_text(first)
    second = normalise_text(second)
    if len(first) != len(second):
        return False
    if first == second:
        return True
    return _counts_match(character_counts(first), character_counts(second))


__all__ = [
    "CharacterCounts",
    "character_counts",
    "count_duplicate_characters",
    "first_non_repeated_character",
    "is_valid_anagram",
]
