"""Seeded random numbers."""

import random
import time

__all__ = ["EngineRandom"]


class EngineRandom:
    """Random generator seeded from the current time unless a seed is given."""

    def __init__(self, seed=None):
        self._gen = random.Random(int(time.time()) if seed is None else seed)

    def set_seed(self, seed):
        self._gen.seed(seed)

    def random_int(self, min_value, max_value):
        """Uniform integer in [min_value, max_value]."""
        return self._gen.randint(min_value, max_value)

    def random_float(self, min_value, max_value):
        """Uniform float in [min_value, max_value)."""
        return min_value + (max_value - min_value) * self._gen.random()