"""Timed callbacks driven by frame delta time."""

from dataclasses import dataclass
from typing import Callable

__all__ = ["TimeEventFunction", "TimeEvent"]


@dataclass
class TimeEventFunction:
    time: float
    max_time: float
    event: Callable[[], None]
    is_update: bool = False
    loop: bool = False


class TimeEvent:
    """Queue of countdown events; newest events run first."""

    def __init__(self):
        self._events = []

    def __len__(self):
        return len(self._events)

    def push_event(self, time, function, is_update=False, loop=False):
        """Schedule function after time seconds; is_update also calls it every tick until then."""
        self._events.insert(0, TimeEventFunction(time, time, function, is_update, loop))

    def update(self, delta_time):
        finished = set()
        for entry in list(self._events):
            entry.time -= delta_time

            if entry.is_update and 0.0 < entry.time:
                entry.event()

            if entry.time <= 0.0:
                entry.event()
                if entry.loop:
                    entry.time = entry.max_time
                else:
                    finished.add(id(entry))

        if finished:
            self._events = [e for e in self._events if id(e) not in finished]