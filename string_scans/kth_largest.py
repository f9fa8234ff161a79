"""Order-statistic selection over numeric lists."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class RankOutOfRangeError(IndexError):
    """Raised when the requested rank falls outside the available elements."""


def kth_largest(values: Optional[Sequence[Real]], k: int) -> Optional[Real]:
    """Return the element at zero-based rank *k* in descending order.

    ``k == 0`` selects the maximum. Duplicates each occupy their own rank, so
    ``kth_largest([5, 5, 5], 2) == 5``. ``None`` or an empty list returns
    ``None`` whatever the value of *k*. The input list is never reordered.

    Raises
    ------
    TypeError
        If *k* is not an integer.
    RankOutOfRangeError
        If *k* is outside ``[0, len(values) - 1]``.
    """

    if not isinstance(k, int) or isinstance(k, bool):
        raise TypeError("k must be an integer")
    if not values:
        return None
    if not 0 <= k < len(values):
        logger.debug("Rank %d requested from %d values", k, len(values))
        raise RankOutOfRangeError(
            f"k must be within [0, {len(values) - 1}], received {k}"
        )
    ordered = sorted(values, reverse=True)
    return ordered[k]


__all__ = ["RankOutOfRangeError", "kth_largest"]
