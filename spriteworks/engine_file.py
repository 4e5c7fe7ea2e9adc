"""Binary file access on top of EnginePath."""

from spriteworks.debug import EngineError
from spriteworks.enginepath import EnginePath

__all__ = ["EngineFile"]


class EngineFile(EnginePath):
    """A file path with an optional open handle; usable as a context manager."""

    def __init__(self, path=None):
        super().__init__(path)
        self._handle = None

    def open(self, mode):
        """Open the file in a C-style mode ("rb", "wb", ...); binary is implied."""
        self.close()
        if "b" not in mode:
            mode += "b"
        try:
            self._handle = open(self.path, mode)
        except OSError as exc:
            raise EngineError(f"{self.path}: failed to open file") from exc
        return self

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def write(self, data):
        if not data:
            raise EngineError("cannot write zero-sized data")
        if self._handle is None:
            raise EngineError("tried to write to a file that is not open")
        self._handle.write(bytes(data))

    def read(self, size):
        if size <= 0:
            raise EngineError("cannot read zero-sized data")
        if self._handle is None:
            raise EngineError("tried to read from a file that is not open")
        return self._handle.read(size)

    def file_size(self):
        if not self.is_file():
            raise EngineError(f"{self.path}: only a file has a size")
        return self.path.stat().st_size

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False