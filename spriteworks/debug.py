"""Engine error type and plain debug output."""

import sys

__all__ = ["EngineError", "output_string"]


class EngineError(RuntimeError):
    """Raised when the engine is used in a way it cannot handle."""


def output_string(text):
    """Write one line of debug text to standard error."""
    sys.stderr.write(f"{text}\n")
    sys.stderr.flush()