"""generative-check: a small property-based testing engine.

This package checks a property (a predicate) against candidates produced by
a generator, stops at the first falsifying candidate and shrinks it to a
locally minimal counterexample:
- Trial runner with first-failure short-circuit
- Greedy shrink engine driven by caller-supplied shrinkers
- Outcome values with human-readable causes
- Seedable random sources and stock generators/shrinkers
- Progress reporter for diagnostic output

Quick Start:
    >>> from generative_check import check_predicate, report
    >>> outcome = check_predicate(
    ...     lambda x: x < 50,
    ...     lambda i: i,
    ...     lambda x: [x - 1] if x > 50 else [],
    ... )
    >>> bool(outcome)
    False
    >>> report("small numbers", outcome)  # writes to stderr

    # Reproducible random candidates
    >>> from generative_check import RandomSource, generators, shrinkers
    >>> source = RandomSource(seed=1234)
    >>> outcome = check_predicate(
    ...     lambda xs: sum(xs) < 500,
    ...     generators.lists(generators.integers(100, source), source=source),
    ...     shrinkers.shrink_list(shrinkers.shrink_integer),
    ... )
"""

from __future__ import annotations  # noqa: I001

from generative_check.core import (
    PACKAGE_NAME,
    Composition,
    GenerativeCheckError,
    GenerativeCheckValidationError,
    ShrinkEngine,
    compose,
    shrink,
)
from generative_check.config import CheckSettings, load_settings
from generative_check.models import (
    CheckReport,
    Outcome,
    Report,
    ShrinkResult,
    as_outcome,
    failure,
    success,
)
from generative_check.protocols import (
    GeneratorProtocol,
    PredicateProtocol,
    ReporterProtocol,
    ShrinkerProtocol,
)
from generative_check.random_source import (
    RandomSource,
    get_default_random_source,
    random_float,
    random_int,
    seed,
)
from generative_check.reporting import Reporter, report
from generative_check.runner import (
    TrialRunner,
    check_predicate,
    format_failure,
    predicate_from_validator,
)
from generative_check import generators, shrinkers

__version__ = "0.1.0"
__package_name__ = "generative-check"

__all__ = [
    # Version
    "__version__",
    "PACKAGE_NAME",
    # Primary interface
    "check_predicate",
    "report",
    "success",
    "failure",
    "shrink",
    "compose",
    "as_outcome",
    # Engine
    "TrialRunner",
    "ShrinkEngine",
    "Reporter",
    "Composition",
    "format_failure",
    "predicate_from_validator",
    # Models
    "Outcome",
    "Report",
    "ShrinkResult",
    "CheckReport",
    # Configuration
    "CheckSettings",
    "load_settings",
    # Errors
    "GenerativeCheckError",
    "GenerativeCheckValidationError",
    # Random sources
    "RandomSource",
    "get_default_random_source",
    "random_float",
    "random_int",
    "seed",
    # Protocols
    "GeneratorProtocol",
    "PredicateProtocol",
    "ShrinkerProtocol",
    "ReporterProtocol",
    # Stock generators and shrinkers
    "generators",
    "shrinkers",
]
