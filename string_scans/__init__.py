"""Deterministic string scanning algorithms and their companion helpers."""

from .character_frequency import (
    CharacterCounts,
    character_counts,
    count_duplicate_characters,
    first_non_repeated_character,
    is_valid_anagram,
)
from .kth_largest import RankOutOfRangeError, kth_largest
from .longest_palindromic_substring import (
    expand_around_center,
    find_longest_palindrome,
    longest_palindromic_substring,
)
from .longest_unique_substring import (
    find_longest_unique_window,
    longest_unique_substring_length,
)
from .span import CharSequence, Span
from .symmetric_tree import (
    ArenaNode,
    TreeArena,
    TreeStructureError,
    build_tree_from_level_order,
    is_symmetric,
    level_order_traversal,
    render_tree,
)
from .text_checks import has_valid_parentheses, is_valid_palindrome, reverse_letters

__all__ = [
    "ArenaNode",
    "CharSequence",
    "CharacterCounts",
    "RankOutOfRangeError",
    "Span",
    "TreeArena",
    "TreeStructureError",
    "build_tree_from_level_order",
    "character_counts",
    "count_duplicate_characters",
    "expand_around_center",
    "find_longest_palindrome",
    "find_longest_unique_window",
    "first_non_repeated_character",
    "has_valid_parentheses",
    "is_symmetric",
    "is_valid_anagram",
    "is_valid_palindrome",
    "kth_largest",
    "level_order_traversal",
    "longest_palindromic_substring",
    "longest_unique_substring_length",
    "render_tree",
    "reverse_letters",
]
