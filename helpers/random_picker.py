"""Random integer sources for ballot discard and bonus draws.

Every picker returns a uniformly distributed integer in an inclusive range.
Callers must pass ``low <= high``; a reversed range raises ``InvalidRangeError``.
"""

import os
import random
import secrets
from typing import Protocol

from loguru import logger


class InvalidRangeError(ValueError):
    """Picker called with low > high."""

    def __init__(self, low: int, high: int):
        self.message = f"Invalid range: [{low}, {high}]. low must not exceed high"
        super().__init__(self.message)


class RandomPicker(Protocol):
    def pick(self, low: int, high: int) -> int: ...


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise InvalidRangeError(low, high)


class SystemRandomPicker:
    """OS entropy (secrets.SystemRandom)."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def pick(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randint(low, high)


class SeededRandomPicker:
    """Mersenne Twister, reproducible when a seed is given."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def pick(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randint(low, high)


def _entropy_available() -> bool:
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


def default_picker(seed: int | None = None) -> RandomPicker:
    """Seeded picker if a seed is given, else OS entropy, else an unseeded PRNG."""
    if seed is not None:
        logger.info("Using seeded random picker (seed={})", seed)
        return SeededRandomPicker(seed)
    if _entropy_available():
        return SystemRandomPicker()
    logger.warning("OS entropy unavailable, falling back to pseudo-random picker")
    return SeededRandomPicker()
