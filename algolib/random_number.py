"""Uniform random integers over half-open ranges."""

from __future__ import annotations

import random


class RandomNumberGenerator:
    """Callable drawing integers from ``[a, b)`` or ``[0, a)``."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def __call__(self, a, b=None):
        if b is None:
            a, b = 0, a
        if a >= b:
            raise ValueError("empty range")
        return self._rng.randrange(a, b)