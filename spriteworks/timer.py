"""Frame delta timer."""

import time

__all__ = ["EngineTimer"]


class EngineTimer:
    """Measures the time between successive checks using a monotonic clock."""

    def __init__(self, clock=None):
        self._clock = clock if clock is not None else time.perf_counter
        self._prev = self._clock()
        self.delta_time = 0.0

    def time_start(self):
        self._prev = self._clock()

    def time_check(self):
        now = self._clock()
        self.delta_time = now - self._prev
        self._prev = now

    def end(self):
        """Check the clock and return the elapsed seconds."""
        self.time_check()
        return self.delta_time