"""Property-based tests using Hypothesis for the engine.

This module checks the invariants of the shrink engine, the trial runner
and the stock shrinkers over generated predicates and candidates.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from generative_check import (
    CheckSettings,
    RandomSource,
    ShrinkEngine,
    TrialRunner,
    check_predicate,
    generators,
    shrink,
)
from generative_check.shrinkers import shrink_float, shrink_integer, shrink_list
from tests.strategies import (
    NON_NEGATIVE_INTS,
    SEEDS,
    SMALL_INTS,
    failing_start_strategy,
    finite_float_strategy,
    int_list_strategy,
    threshold_strategy,
)

# =============================================================================
# Trial Runner Properties
# =============================================================================


class TestTrialRunnerProperties:
    @given(trials=st.integers(min_value=0, max_value=200))
    @settings(max_examples=30)
    def test_always_true_passes_without_shrinking(self, trials: int) -> None:
        """A property that always holds never reaches the shrinker."""

        def shrinker(candidate: int) -> list[int]:
            raise AssertionError("shrinker called on a passing run")

        outcome = check_predicate(lambda x: True, lambda i: i, shrinker, trial_count=trials)
        assert outcome
        assert outcome.cause == ""

    @given(value=SMALL_INTS)
    @settings(max_examples=50)
    def test_first_trial_failure_reports_original(self, value: int) -> None:
        """A failure on trial 0 names generator(0) as the original."""
        outcome = check_predicate(lambda x: False, lambda i: value, shrink_integer)
        assert not outcome
        assert f"  (from {value!r})\n" in outcome.cause

    @given(k=threshold_strategy(), trials=st.integers(min_value=1, max_value=600))
    @settings(max_examples=50)
    def test_failing_trial_is_first_counterexample(self, k: int, trials: int) -> None:
        """The runner stops at the first index that falsifies the property."""
        report = TrialRunner(CheckSettings(trial_count=trials)).run(
            lambda x: x < k, generators.trial_index, shrink_integer
        )
        if trials <= k:
            assert report.passed
            assert report.trials_run == trials
        else:
            assert report.failing_trial == k
            assert report.original == k
            assert report.shrunk == k

    @given(seed=SEEDS)
    @settings(max_examples=25, suppress_health_check=[HealthCheck.too_slow])
    def test_seeded_runs_are_reproducible(self, seed: int) -> None:
        """The same seed yields the same failure message."""

        def run() -> str:
            source = RandomSource(seed=seed)
            return check_predicate(
                lambda xs: sum(xs) < 150,
                generators.lists(generators.integers(100, source), source=source),
                shrink_list(shrink_integer),
            ).cause

        assert run() == run()


# =============================================================================
# Shrink Engine Properties
# =============================================================================


class TestShrinkEngineProperties:
    @given(value=SMALL_INTS)
    def test_minimal_candidate_unchanged(self, value: int) -> None:
        """Shrinking with an empty proposal list is the identity."""
        candidate, outcome = shrink(lambda x: False, value, lambda x: [])
        assert candidate == value
        assert not outcome

    @given(start=failing_start_strategy())
    def test_integer_shrinking_reaches_threshold(self, start: tuple[int, int]) -> None:
        """Greedy integer shrinking finds the exact boundary of ``x < k``."""
        k, n = start
        candidate, outcome = shrink(lambda x: x < k, n, shrink_integer)
        assert candidate == k
        assert not outcome

    @given(start=failing_start_strategy(), step=st.integers(min_value=1, max_value=7))
    def test_history_is_a_chain_of_failures(self, start: tuple[int, int], step: int) -> None:
        """Every committed candidate fails; the chain starts at the input."""
        k, n = start

        def predicate(x: int) -> bool:
            return x < k

        result = ShrinkEngine().run(predicate, n, lambda x: [x - step] if x > 0 else [])
        assert result.history[0] == n
        assert result.history[-1] == result.candidate
        assert all(not predicate(c) for c in result.history)
        assert result.steps == (n - k) // step

    @given(xs=int_list_strategy(), size=st.integers(min_value=0, max_value=4))
    @settings(max_examples=50)
    def test_list_shrinking_keeps_minimal_length(self, xs: list[int], size: int) -> None:
        """Shrinking a too-long list yields exactly ``size + 1`` zeros."""
        if len(xs) <= size:
            return
        candidate, _ = shrink(lambda ys: len(ys) <= size, xs, shrink_list(shrink_integer))
        assert candidate == [0] * (size + 1)

    @given(limit=NON_NEGATIVE_INTS, start=st.integers(min_value=0, max_value=10_000))
    def test_step_limit_bounds_history(self, limit: int, start: int) -> None:
        """The step limit caps the committed history."""
        result = ShrinkEngine(max_steps=limit).run(
            lambda x: False, start, lambda x: [x + 1]
        )
        assert result.steps == limit
        assert result.exhausted


# =============================================================================
# Stock Shrinker Properties
# =============================================================================


class TestShrinkerProperties:
    @given(n=SMALL_INTS)
    def test_integer_proposals_move_toward_zero(self, n: int) -> None:
        proposals = shrink_integer(n)
        assert n not in proposals
        assert len(proposals) == len(set(proposals))
        assert all(abs(p) <= abs(n) for p in proposals)
        assert all(abs(p) < abs(n) or (n < 0 and p == -n) for p in proposals)

    @given(x=finite_float_strategy())
    def test_float_proposals_move_toward_zero(self, x: float) -> None:
        proposals = shrink_float(x)
        assert x not in proposals
        assert all(abs(p) < abs(x) or (p == 0.0) for p in proposals)

    @given(xs=int_list_strategy())
    def test_list_proposals_are_smaller(self, xs: list[int]) -> None:
        for proposal in shrink_list(shrink_integer)(xs):
            assert proposal != xs
            assert len(proposal) < len(xs) or (
                len(proposal) == len(xs)
                and sum(map(abs, proposal)) <= sum(map(abs, xs))
            )
