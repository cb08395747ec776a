"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Verbosity, settings

from generative_check import random_source
from generative_check.random_source import RandomSource

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def seeded_source() -> RandomSource:
    """A RandomSource with a fixed seed."""
    return RandomSource(seed=20240517)


@pytest.fixture
def fresh_default_source(monkeypatch: pytest.MonkeyPatch) -> None:
    """Discard the default random source so the next lookup recreates it."""
    monkeypatch.setattr(random_source, "_default_source", None)
