"""Outcome and result models.

This module re-exports all public models for convenient imports.
"""

from __future__ import annotations

from generative_check.models.outcome import Outcome, as_outcome, failure, success
from generative_check.models.results import CheckReport, Report, ShrinkResult

__all__ = [
    "Outcome",
    "as_outcome",
    "success",
    "failure",
    "CheckReport",
    "Report",
    "ShrinkResult",
]
