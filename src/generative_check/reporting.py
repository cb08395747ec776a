"""Progress and failure output for named property checks.

A passing test writes a single progress marker with no newline; a failing
one writes a blank line, ``Failed test: <name>`` and the cause text. Output
goes to standard error unless another stream is given.
"""

from __future__ import annotations

import sys
from typing import TextIO

from generative_check.config import CheckSettings
from generative_check.core.errors import GenerativeCheckError
from generative_check.models import Outcome, Report


class Reporter:
    """Writes outcomes of named tests to a diagnostic stream.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> reporter = Reporter(buffer)
        >>> reporter.report("addition commutes", Outcome(True))
        >>> buffer.getvalue()
        '.'
    """

    def __init__(self, stream: TextIO | None = None, progress_marker: str = ".") -> None:
        """Initialize the reporter.

        Args:
            stream: Destination stream. Defaults to ``sys.stderr`` looked up
                on every call.
            progress_marker: Single character written per passing test.

        Raises:
            GenerativeCheckError: If ``progress_marker`` is not one character.
        """
        if len(progress_marker) != 1:
            raise GenerativeCheckError.invalid_argument(
                "progress_marker", progress_marker, "must be a single character"
            )
        self._stream = stream
        self._progress_marker = progress_marker

    @classmethod
    def from_settings(cls, settings: CheckSettings, stream: TextIO | None = None) -> Reporter:
        """Create a reporter using the progress marker from ``settings``."""
        return cls(stream, progress_marker=settings.progress_marker)

    @property
    def stream(self) -> TextIO:
        """Get the destination stream."""
        return self._stream if self._stream is not None else sys.stderr

    def report(self, name: str, outcome: Outcome) -> None:
        """Write the outcome of the test called ``name``."""
        stream = self.stream
        if outcome:
            stream.write(self._progress_marker)
        else:
            stream.write("\n")
            stream.write(f"Failed test: {name}\n")
            stream.write(f"{outcome.cause}\n")
        stream.flush()

    def emit(self, report: Report) -> None:
        """Write a Report."""
        self.report(report.name, report.outcome)


def report(name: str, outcome: Outcome, stream: TextIO | None = None) -> None:
    """Write the outcome of the test called ``name`` to ``stream``.

    Args:
        name: Test name shown on failure.
        outcome: Outcome to report.
        stream: Destination stream. Defaults to ``sys.stderr``.
    """
    Reporter(stream).report(name, outcome)
