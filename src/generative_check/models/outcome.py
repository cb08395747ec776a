"""Pass/fail outcome of applying a predicate to a candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from abstract_validation_base import ValidationResult


@dataclass(frozen=True)
class Outcome:
    """Immutable result of a property check.

    Truthiness follows ``successful`` so an Outcome can be used directly in
    a branch. ``cause`` is the human-readable reason for a failure and is
    empty on success by convention.

    Example:
        >>> outcome = failure("negative balance")
        >>> if not outcome:
        ...     print(outcome.cause)
        negative balance
    """

    successful: bool
    cause: str = ""

    def __bool__(self) -> bool:
        return self.successful


def success(cause: str = "") -> Outcome:
    """Create a successful outcome."""
    return Outcome(True, cause)


def failure(cause: str) -> Outcome:
    """Create a failed outcome carrying ``cause``."""
    return Outcome(False, cause)


def as_outcome(value: Any) -> Outcome:
    """Coerce a predicate's return value into an Outcome.

    Args:
        value: An Outcome (returned as is), a ValidationResult (its error
            messages become the cause), or any other value judged by
            truthiness.

    Returns:
        Outcome equivalent of ``value``.
    """
    if isinstance(value, Outcome):
        return value
    if isinstance(value, ValidationResult):
        if value.is_valid:
            return success()
        return failure(_describe_errors(value))
    return Outcome(bool(value))


def _describe_errors(result: ValidationResult) -> str:
    messages = []
    for err in result.errors:
        field = getattr(err, "field", None)
        messages.append(f"{field}: {err.message}" if field else err.message)
    return "; ".join(messages)
