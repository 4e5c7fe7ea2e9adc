"""Multicast callback list."""

__all__ = ["EngineDelegate"]


class EngineDelegate:
    """Holds callables and calls them all, in the order they were added."""

    def __init__(self, function=None):
        self._functions = []
        if function is not None:
            self._functions.append(function)

    def is_bind(self):
        return bool(self._functions)

    def __iadd__(self, function):
        self._functions.append(function)
        return self

    def __call__(self):
        for function in list(self._functions):
            function()

    def clear(self):
        self._functions.clear()