from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from generative_check.config import CheckSettings, load_settings
from generative_check.core.composition import compose
from generative_check.core.shrinking import ShrinkEngine
from generative_check.models import CheckReport, Outcome, as_outcome, failure, success

if TYPE_CHECKING:
    from abstract_validation_base import BaseValidator

logger = logging.getLogger(__name__)

C = TypeVar("C")


def format_failure(
    cause: str,
    shrunk: Any,
    original: Any,
    formatter: Callable[[Any], str] = repr,
) -> str:
    """Build the cause text for a falsified property.

    Args:
        cause: Cause reported by the predicate on the shrunk candidate.
        shrunk: Minimal failing candidate.
        original: Failing candidate before shrinking.
        formatter: Diagnostic representation of a candidate.

    Returns:
        Multi-line message naming the reason and both reproducers.
    """
    return (
        "\n"
        f"Reason: {cause}\n"
        f"     in {formatter(shrunk)}\n"
        f"  (from {formatter(original)})\n"
    )


class TrialRunner:
    """Runs generate-and-check trials and shrinks the first failure.

    Example:
        >>> runner = TrialRunner(CheckSettings(trial_count=20))
        >>> report = runner.run(lambda x: x < 5, lambda i: i, lambda x: [x - 1])
        >>> report.failing_trial, report.shrunk
        (5, 5)

        # Build settings from GENERATIVE_CHECK_* variables
        >>> runner = TrialRunner(load_settings())
    """

    def __init__(
        self,
        settings: CheckSettings | None = None,
        *,
        formatter: Callable[[Any], str] = repr,
        shrink_engine: ShrinkEngine | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            settings: Run settings. Defaults to CheckSettings().
            formatter: Diagnostic representation of candidates in failure
                messages.
            shrink_engine: Engine used on the first failure. Defaults to
                one limited by ``settings.max_shrinks``.
        """
        self._settings = settings or CheckSettings()
        self._formatter = formatter
        self._shrink_engine = shrink_engine or ShrinkEngine(self._settings.max_shrinks)

    @property
    def settings(self) -> CheckSettings:
        """Get the run settings."""
        return self._settings

    @property
    def shrink_engine(self) -> ShrinkEngine:
        """Get the shrink engine."""
        return self._shrink_engine

    def run(
        self,
        predicate: Callable[[C], Any],
        generator: Callable[[int], C],
        shrinker: Callable[[C], Iterable[C]],
    ) -> CheckReport[C]:
        """Run up to ``settings.trial_count`` trials.

        Stops at the first candidate the predicate rejects, shrinks it and
        reports both the original and the minimal candidate. Exceptions
        raised by the generator, predicate or shrinker propagate.

        Args:
            predicate: Property under test.
            generator: Maps a trial index to a candidate.
            shrinker: Proposes smaller candidates for a failing one.

        Returns:
            CheckReport describing the run.
        """
        trial_count = self._settings.trial_count

        for i in range(trial_count):
            candidate = generator(i)
            if as_outcome(predicate(candidate)):
                continue

            logger.info("Property falsified on trial %d by %s", i, self._formatter(candidate))
            shrunk = self._shrink_engine.run(predicate, candidate, shrinker)
            message = format_failure(
                shrunk.outcome.cause, shrunk.candidate, candidate, self._formatter
            )
            return CheckReport(
                outcome=failure(message),
                trials_run=i + 1,
                failing_trial=i,
                original=candidate,
                shrink=shrunk,
            )

        logger.debug("All %d trials passed", trial_count)
        return CheckReport(outcome=success(), trials_run=trial_count)

    def check(
        self,
        predicate: Callable[[C], Any],
        generator: Callable[[int], C],
        shrinker: Callable[[C], Iterable[C]],
    ) -> Outcome:
        """Run the trials and return only the Outcome."""
        return self.run(predicate, generator, shrinker).outcome


def check_predicate(
    predicate: Callable[[C], Any],
    generator: Callable[[int], C],
    shrinker: Callable[[C], Iterable[C]],
    trial_count: int = 100,
) -> Outcome:
    """Check a property over ``trial_count`` generated candidates.

    Args:
        predicate: Property under test.
        generator: Maps a trial index to a candidate.
        shrinker: Proposes smaller candidates for a failing one.
        trial_count: Number of trials to run.

    Returns:
        Success if every trial held, otherwise a failure whose cause names
        the reason, the minimal candidate and the original one. A
        non-positive ``trial_count`` runs no trials and succeeds.
    """
    settings = load_settings(environ={}, trial_count=max(trial_count, 0))
    return TrialRunner(settings).check(predicate, generator, shrinker)


def predicate_from_validator(validator: BaseValidator[C]) -> Callable[[C], Outcome]:
    """Use a validator as a predicate.

    The validator's error messages become the failure cause.
    """
    return compose(as_outcome, validator.validate)
