"""Stock generators.

Each generator maps a trial index to a candidate. Those that draw random
values take an optional RandomSource; without one they use the default
source, looked up on every call.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from generative_check.core.composition import Composition, compose
from generative_check.core.errors import GenerativeCheckError
from generative_check.random_source import RandomSource, get_default_random_source

T = TypeVar("T")
U = TypeVar("U")


def _resolve(source: RandomSource | None) -> RandomSource:
    return source if source is not None else get_default_random_source()


def trial_index(index: int) -> int:
    """Use the trial index itself as the candidate."""
    return index


def constant(value: T) -> Callable[[int], T]:
    """Generator that always produces ``value``."""

    def generate(index: int) -> T:
        return value

    return generate


def integers(limit: int = 100, source: RandomSource | None = None) -> Callable[[int], int]:
    """Uniform integers in ``[0, limit]``.

    Raises:
        GenerativeCheckError: If ``limit`` is negative.
    """
    if limit < 0:
        raise GenerativeCheckError.invalid_argument("limit", limit, "must be >= 0")

    def generate(index: int) -> int:
        return _resolve(source).random_int(limit)

    return generate


def sized_integers(source: RandomSource | None = None) -> Callable[[int], int]:
    """Uniform integers in ``[0, index]``, growing with the trial index."""

    def generate(index: int) -> int:
        return _resolve(source).random_int(index)

    return generate


def floats(
    sigma: float = 5.0, mean: float = 0.0, source: RandomSource | None = None
) -> Callable[[int], float]:
    """Normally distributed floats."""

    def generate(index: int) -> float:
        return _resolve(source).random_float(sigma, mean)

    return generate


def lists(
    element: Callable[[int], T],
    max_length: int = 10,
    source: RandomSource | None = None,
) -> Callable[[int], list[T]]:
    """Lists whose length grows with the trial index up to ``max_length``.

    Args:
        element: Generator for the elements; called with the trial index.
        max_length: Upper bound on the list length.
        source: Random source for the length.

    Raises:
        GenerativeCheckError: If ``max_length`` is negative.
    """
    if max_length < 0:
        raise GenerativeCheckError.invalid_argument("max_length", max_length, "must be >= 0")

    def generate(index: int) -> list[T]:
        length = _resolve(source).random_int(min(index, max_length))
        return [element(index) for _ in range(length)]

    return generate


def mapped(func: Callable[[T], U], generator: Callable[[int], T]) -> Composition[int, T, U]:
    """Apply ``func`` to every candidate of ``generator``.

    Example:
        >>> evens = mapped(lambda n: n * 2, trial_index)
        >>> evens(21)
        42
    """
    return compose(func, generator)
