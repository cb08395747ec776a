from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from generative_check.models import Outcome

C = TypeVar("C")
C_co = TypeVar("C_co", covariant=True)
C_contra = TypeVar("C_contra", contravariant=True)


@runtime_checkable
class GeneratorProtocol(Protocol[C_co]):
    """Protocol for candidate generators.

    A generator maps a 0-based trial index to a candidate. It is called
    exactly once per trial and may consult a RandomSource internally.
    """

    def __call__(self, index: int) -> C_co:
        """Produce the candidate for trial ``index``."""
        ...


@runtime_checkable
class PredicateProtocol(Protocol[C_contra]):
    """Protocol for properties under test.

    Implementations return a bool, an Outcome or a ValidationResult. They
    must be deterministic since the shrink engine re-evaluates them.
    """

    def __call__(self, candidate: C_contra) -> Any:
        """Check the property for ``candidate``."""
        ...


@runtime_checkable
class ShrinkerProtocol(Protocol[C]):
    """Protocol for shrinkers.

    Implementations return an ordered, finite iterable of candidates that
    are smaller than the input, most preferred first, and eventually an
    empty one for minimal values.
    """

    def __call__(self, candidate: C) -> Iterable[C]:
        """Propose smaller candidates."""
        ...


@runtime_checkable
class ReporterProtocol(Protocol):
    """Protocol for outcome reporters."""

    def report(self, name: str, outcome: Outcome) -> None:
        """Record the outcome of the test called ``name``."""
        ...
