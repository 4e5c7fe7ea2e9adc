"""Filesystem path wrapper and the base class for loaded resources."""

from pathlib import Path

from spriteworks.debug import EngineError
from spriteworks.engine_object import EngineObject

__all__ = ["EnginePath", "EngineResources"]


class EnginePath:
    """A mutable filesystem path; defaults to the current working directory."""

    def __init__(self, path=None):
        self.path = Path.cwd() if path is None else Path(path)

    def __str__(self):
        return str(self.path)

    def is_exists(self):
        return self.path.exists()

    def is_directory(self):
        return self.path.is_dir()

    def is_file(self):
        """True for anything that is not a directory."""
        return not self.is_directory()

    def move_parent(self):
        self.path = self.path.parent

    def append(self, name):
        self.path = self.path / name

    def file_name(self):
        """Last path component; only valid for file paths."""
        if self.is_directory():
            raise EngineError(f"file_name needs a file path: {self.path}")
        return self.path.name

    def directory_name(self):
        """Last path component; only valid for directory paths."""
        if not self.is_directory():
            raise EngineError(f"directory_name needs a directory path: {self.path}")
        return self.path.name

    def extension(self):
        return self.path.suffix

    def move_parent_to_directory(self, name):
        """Walk up from this directory until name exists beside a parent; move there.

        The filesystem root itself is not searched. Returns whether a match was found.
        """
        if not self.is_directory():
            raise EngineError(
                f"move_parent_to_directory needs a directory path: {self.path}"
            )

        current = self.path.absolute()
        root = Path(current.anchor)
        while current != root:
            candidate = current / name
            if candidate.exists():
                self.path = candidate
                return True
            parent = current.parent
            if parent == current:
                break
            current = parent
        return False


class EngineResources(EngineObject):
    """Named engine object that remembers where it came from."""

    def __init__(self, name=""):
        super().__init__(name)
        self.path = EnginePath()