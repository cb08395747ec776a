"""Stock shrinkers.

Every shrinker returns proposals that are strictly smaller than its input
under its own measure, most aggressive first, and nothing for the minimal
value, so repeated shrinking always terminates.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _unique(values: Iterable[T], exclude: T) -> list[T]:
    proposals: list[T] = []
    for value in values:
        if value != exclude and value not in proposals:
            proposals.append(value)
    return proposals


def no_shrink(candidate: Any) -> list[Any]:
    """Shrinker for candidates that have no smaller form."""
    return []


def shrink_integer(n: int) -> list[int]:
    """Propose integers closer to zero.

    Order: zero, the positive counterpart of a negative, half the distance
    to zero, one step toward zero.

    Example:
        >>> shrink_integer(10)
        [0, 5, 9]
        >>> shrink_integer(-7)
        [0, 7, -3, -6]
    """
    if n == 0:
        return []
    candidates = [0]
    if n < 0:
        candidates.append(-n)
    if n > 0:
        candidates.extend([n // 2, n - 1])
    else:
        candidates.extend([-(-n // 2), n + 1])
    return _unique(candidates, n)


def shrink_float(x: float) -> list[float]:
    """Propose floats closer to zero.

    Non-finite values shrink straight to ``0.0``. Halving stops below 1 so
    the chain of proposals stays short.

    Example:
        >>> shrink_float(7.5)
        [0.0, 7.0, 3.75]
    """
    if x == 0.0:
        return []
    if not math.isfinite(x):
        return [0.0]
    candidates = [0.0, float(math.trunc(x))]
    if abs(x) >= 1.0:
        candidates.append(x / 2)
    return _unique(candidates, x)


def shrink_list(
    element_shrinker: Callable[[T], Iterable[T]] | None = None,
) -> Callable[[Sequence[T]], list[list[T]]]:
    """Build a shrinker for lists.

    Proposals: the empty list, each half removed, each single element
    removed, then each element replaced by its own shrink proposals.

    Args:
        element_shrinker: Shrinker for the elements. Without one, only the
            structure of the list shrinks.

    Example:
        >>> shrink_list(shrink_integer)([3])
        [[], [0], [1], [2]]
    """

    def shrink(candidate: Sequence[T]) -> list[list[T]]:
        items = list(candidate)
        if not items:
            return []

        proposals: list[list[T]] = [[]]
        half = len(items) // 2
        if half > 0:
            proposals.append(items[half:])
            proposals.append(items[:half])
        for i in range(len(items)):
            proposals.append(items[:i] + items[i + 1 :])
        if element_shrinker is not None:
            for i, item in enumerate(items):
                for smaller in element_shrinker(item):
                    proposals.append(items[:i] + [smaller] + items[i + 1 :])
        return _unique(proposals, items)

    return shrink
