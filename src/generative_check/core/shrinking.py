"""Reduction of a failing candidate to a locally minimal counterexample."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from generative_check.core.errors import GenerativeCheckError
from generative_check.models import Outcome, ShrinkResult, as_outcome

logger = logging.getLogger(__name__)

C = TypeVar("C")

_NO_PROPOSAL = object()


class ShrinkEngine:
    """Greedy first-improvement shrinker driver.

    Starting from a failing candidate, the engine asks the shrinker for
    proposals and commits the first one the predicate still rejects, then
    starts over from the committed candidate. It stops when no proposal
    fails. The shrinker's ordering alone decides which of several failing
    proposals wins; the engine never compares candidates itself.

    Termination depends on the shrinker being well-founded. ``max_steps``
    caps the number of committed steps for shrinkers that are not. With
    ``keep_history=False`` only the first and last committed candidates are
    kept, so long chains over large candidates do not accumulate.

    Example:
        >>> engine = ShrinkEngine()
        >>> result = engine.run(lambda x: x < 10, 37, lambda x: [x - 1] if x > 0 else [])
        >>> result.candidate
        10
    """

    def __init__(self, max_steps: int | None = None, keep_history: bool = True) -> None:
        """Initialize the engine.

        Args:
            max_steps: Maximum number of committed shrink steps, or None
                for no limit.
            keep_history: Record every committed candidate. When False,
                history holds only the starting and the final candidate.

        Raises:
            GenerativeCheckError: If ``max_steps`` is negative.
        """
        if max_steps is not None and max_steps < 0:
            raise GenerativeCheckError.invalid_argument("max_steps", max_steps, "must be >= 0")
        self._max_steps = max_steps
        self._keep_history = keep_history

    @property
    def max_steps(self) -> int | None:
        """Step limit, None when unbounded."""
        return self._max_steps

    def run(
        self,
        predicate: Callable[[C], Any],
        candidate: C,
        shrinker: Callable[[C], Iterable[C]],
    ) -> ShrinkResult[C]:
        """Shrink ``candidate`` while it keeps falsifying ``predicate``.

        Args:
            predicate: Property under test; must be deterministic.
            candidate: A candidate for which ``predicate`` fails.
            shrinker: Returns smaller candidates, most preferred first.

        Returns:
            ShrinkResult with the minimal candidate, the predicate's outcome
            on it and the committed history.
        """
        smallest = candidate
        history = [candidate]
        steps = 0
        attempts = 0
        exhausted = False

        while True:
            found: Any = _NO_PROPOSAL
            for proposal in shrinker(smallest):
                attempts += 1
                if not as_outcome(predicate(proposal)):
                    found = proposal
                    break
            if found is _NO_PROPOSAL:
                break

            # The cap only applies while a smaller failing candidate exists
            if self._max_steps is not None and steps >= self._max_steps:
                exhausted = True
                logger.warning("Shrinking stopped after %d steps at %r", steps, smallest)
                break

            smallest = found
            steps += 1
            if self._keep_history:
                history.append(found)
            logger.debug("Shrink step %d: %r", steps, found)

        if not self._keep_history and steps:
            history.append(smallest)

        outcome = as_outcome(predicate(smallest))
        logger.debug("Shrinking finished after %d steps and %d attempts", steps, attempts)
        return ShrinkResult(
            candidate=smallest,
            outcome=outcome,
            history=history,
            steps=steps,
            attempts=attempts,
            exhausted=exhausted,
        )


def shrink(
    predicate: Callable[[C], Any],
    candidate: C,
    shrinker: Callable[[C], Iterable[C]],
) -> tuple[C, Outcome]:
    """Shrink a failing candidate without a step limit.

    Returns:
        Tuple of (minimal_candidate, outcome_on_minimal).
    """
    return ShrinkEngine().run(predicate, candidate, shrinker).as_tuple()
