"""Pseudo-random streams for generators.

The engine itself never draws random numbers; generators do. Each
RandomSource owns its stream, so a test can pass its own seeded source
and get reproducible candidates. A lazily created default source serves
generators that are not given one.
"""

from __future__ import annotations

import logging
import random
import threading
import time

from generative_check.config import load_seed
from generative_check.core.errors import GenerativeCheckError

logger = logging.getLogger(__name__)


class RandomSource:
    """Seedable stream producing normal floats and uniform integers.

    Access is serialized, so one source may be shared between threads,
    but draws from a shared source interleave. Use ``spawn()`` to give a
    caller an isolated stream.

    Example:
        >>> source = RandomSource(seed=42)
        >>> 0 <= source.random_int(10) <= 10
        True
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the source.

        Args:
            seed: Seed for the stream. Defaults to the wall clock in
                nanoseconds; the chosen value is available as ``seed``.
        """
        self._lock = threading.Lock()
        self._seed = seed if seed is not None else time.time_ns()
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        """Seed the stream was last started from."""
        return self._seed

    def reseed(self, seed: int) -> None:
        """Restart the stream from ``seed``."""
        with self._lock:
            self._seed = seed
            self._rng.seed(seed)

    def random_float(self, sigma: float = 5.0, mean: float = 0.0) -> float:
        """Draw from a normal distribution.

        Args:
            sigma: Standard deviation.
            mean: Mean of the distribution.

        Returns:
            A normally distributed float.
        """
        with self._lock:
            return self._rng.gauss(mean, sigma)

    def random_int(self, limit: int) -> int:
        """Draw uniformly from the inclusive range ``[0, limit]``.

        Raises:
            GenerativeCheckError: If ``limit`` is negative.
        """
        if limit < 0:
            raise GenerativeCheckError.invalid_argument("limit", limit, "must be >= 0")
        with self._lock:
            return self._rng.randint(0, limit)

    def spawn(self) -> RandomSource:
        """Create an independent source seeded from this one."""
        with self._lock:
            child_seed = self._rng.getrandbits(64)
        return RandomSource(seed=child_seed)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


# Module-level default source
_default_source: RandomSource | None = None
_default_lock = threading.Lock()


def get_default_random_source() -> RandomSource:
    """Get the default RandomSource singleton.

    The source is seeded from ``GENERATIVE_CHECK_SEED`` when set and from
    the wall clock otherwise. The seed is logged so a failing run can be
    replayed by exporting it.

    Returns:
        Shared RandomSource instance.
    """
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = RandomSource(seed=load_seed())
            logger.info("Default random source seeded with %d", _default_source.seed)
        return _default_source


def seed(value: int) -> None:
    """Reseed the default random source."""
    get_default_random_source().reseed(value)
    logger.info("Default random source reseeded with %d", value)


def random_float(sigma: float = 5.0, mean: float = 0.0) -> float:
    """Draw a normal float from the default source."""
    return get_default_random_source().random_float(sigma, mean)


def random_int(limit: int) -> int:
    """Draw a uniform integer in ``[0, limit]`` from the default source."""
    return get_default_random_source().random_int(limit)
