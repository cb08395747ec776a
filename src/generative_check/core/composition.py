"""Function composition for building derived generators and shrinkers."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class Composition(Generic[A, B, R]):
    """Callable computing ``f(g(x))``.

    The input type is the input type of ``g`` and the result type is the
    result type of ``f``. Exceptions from either function propagate
    unchanged.

    Example:
        >>> double_index = compose(lambda n: n * 2, int)
        >>> double_index("21")
        42
    """

    __slots__ = ("f", "g")

    def __init__(self, f: Callable[[B], R], g: Callable[[A], B]) -> None:
        self.f = f
        self.g = g

    def __call__(self, x: A) -> R:
        return self.f(self.g(x))

    def __repr__(self) -> str:
        return f"Composition({self.f!r}, {self.g!r})"


def compose(f: Callable[[B], R], g: Callable[[A], B]) -> Composition[A, B, R]:
    """Compose two single-argument callables.

    Args:
        f: Outer function, applied last.
        g: Inner function, applied first.

    Returns:
        Callable ``h`` with ``h(x) == f(g(x))``.
    """
    return Composition(f, g)
