"""Generative check core - the domain-agnostic engine pieces.

Usage:
    from generative_check.core import (
        # Errors
        GenerativeCheckError,
        GenerativeCheckValidationError,
        # Composition
        Composition,
        compose,
        # Shrinking
        ShrinkEngine,
        shrink,
    )
"""

from __future__ import annotations

from generative_check.core.composition import Composition, compose
from generative_check.core.errors import (
    PACKAGE_NAME,
    GenerativeCheckError,
    GenerativeCheckValidationError,
)
from generative_check.core.shrinking import ShrinkEngine, shrink

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "GenerativeCheckError",
    "GenerativeCheckValidationError",
    # Composition
    "Composition",
    "compose",
    # Shrinking
    "ShrinkEngine",
    "shrink",
]
