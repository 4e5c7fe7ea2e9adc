"""Base object with name, activity, debug flag and delayed destruction."""

__all__ = ["EngineObject"]


class EngineObject:
    def __init__(self, name=""):
        self.name = name
        self._destroyed = False
        self._active = True
        self._death_time_check = False
        self._death_time = 0.0
        self._cur_death_time = 0.0
        self._debug = False

    def is_active(self):
        return self._active and not self._destroyed

    def is_destroy(self):
        return self._destroyed

    def destroy(self, time=0.0):
        """Destroy now, or after time seconds of release checks when time is positive."""
        self._death_time = time
        if 0.0 < time:
            self._death_time_check = True
            return
        self._destroyed = True

    def release_time_check(self, delta_time):
        if not self._death_time_check:
            return
        self._cur_death_time += delta_time
        if self._death_time <= self._cur_death_time:
            self._destroyed = True

    def release_check(self, delta_time):
        """Hook for subclasses; does nothing here."""

    def set_active(self, is_active):
        self._active = is_active

    def set_active_switch(self):
        self._active = not self._active

    def is_debug(self):
        return self._debug

    def debug_on(self):
        self._debug = True

    def debug_off(self):
        self._debug = False

    def debug_switch(self):
        self._debug = not self._debug