"""Span metadata shared by the string scanners."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass

CharSequence = Sequence[Hashable]


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` interval over *text*.

    Attributes
    ----------
    text:
        Sequence the span was computed against.
    start:
        Inclusive start index.
    end:
        Exclusive end index.
    """

    text: CharSequence
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.text):
            raise ValueError(
                f"span [{self.start}, {self.end}) is outside a sequence of "
                f"length {len(self.text)}"
            )

    @property
    def value(self) -> CharSequence:
        """Return the covered slice of *text*."""

        return self.text[self.start : self.end]

    @property
    def length(self) -> int:
        """Return the number of characters covered."""

        return self.end - self.start

    def to_dict(self) -> dict[str, object]:
        value = self.value
        if not isinstance(value, str):
            value = list(value)
        return {
            "start": self.start,
            "end": self.end,
            "length": self.length,
            "value": value,
        }


def normalise_text(text: CharSequence | None) -> CharSequence:
    """Return *text* or ``""`` for absent input.

    Raises
    ------
    TypeError
        If *text* is neither ``None`` nor a sequence.
    """

    if text is None:
        return ""
    if not isinstance(text, Sequence):
        raise TypeError("text must be a sequence of characters")
    return text


__all__ = ["CharSequence", "Span", "normalise_text"]
