"""Whole-string checks: reversal, palindrome validation, parenthesis balance."""

from __future__ import annotations

from typing import Optional


def reverse_letters(text: Optional[str]) -> Optional[str]:
    """Return *text* with its characters in reverse order.

    ``None`` and ``""`` both return ``None``.
    """

    if not text:
        return None
    characters = []
    for index in range(len(text) - 1, -1, -1):
        characters.append(text[index])
    return "".join(characters)


def is_valid_palindrome(text: Optional[str]) -> bool:
    """Return ``True`` when *text* reads the same in both directions.

    Empty and absent strings are not palindromes. The comparison is
    case-sensitive and keeps punctuation and whitespace.
    """

    if not text:
        return False
    left, right = 0, len(text) - 1
    while left < right:
        if text[left] != text[right]:
            return False
        left += 1
        right -= 1
    return True


def has_valid_parentheses(text: Optional[str]) -> bool:
    """Return ``True`` when every ``(`` in *text* is closed in order.

    Characters other than ``(`` and ``)`` are ignored. Empty input is valid.
    """

    if not text:
        return True
    balance = 0
    for char in text:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance < 0:
                return False
    return balance == 0


__all__ = ["has_valid_parentheses", "is_valid_palindrome", "reverse_letters"]
