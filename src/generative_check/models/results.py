"""Result classes for shrinking and trial runs.

This module contains dataclasses describing what the shrink engine and
the trial runner observed, beyond the bare Outcome they compute.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from generative_check.models.outcome import Outcome

C = TypeVar("C")


@dataclass
class ShrinkResult(Generic[C]):
    """Result of reducing a failing candidate.

    Attributes:
        candidate: The smallest failing candidate found.
        outcome: The predicate's outcome on ``candidate``.
        history: Committed candidates in order; the first element is the
            candidate shrinking started from and the last is ``candidate``.
            Intermediate steps are omitted when the engine does not keep
            history.
        steps: Number of committed shrink steps.
        attempts: Number of shrink proposals the predicate was applied to.
        exhausted: True if the step limit stopped shrinking early.
    """

    candidate: C
    outcome: Outcome
    history: list[C] = field(default_factory=list)
    steps: int = 0
    attempts: int = 0
    exhausted: bool = False

    def as_tuple(self) -> tuple[C, Outcome]:
        """Return the ``(minimal_candidate, outcome)`` pair."""
        return self.candidate, self.outcome


@dataclass
class CheckReport(Generic[C]):
    """Everything a trial run observed.

    ``original`` and ``shrink`` are only set when a trial failed.
    """

    outcome: Outcome
    trials_run: int
    failing_trial: int | None = None
    original: C | None = None
    shrink: ShrinkResult[C] | None = None

    @property
    def passed(self) -> bool:
        """Check if every trial held."""
        return bool(self.outcome)

    @property
    def shrunk(self) -> C | None:
        """The minimal failing candidate, if any."""
        return self.shrink.candidate if self.shrink is not None else None


@dataclass(frozen=True)
class Report:
    """A named outcome handed to the reporter."""

    name: str
    outcome: Outcome
