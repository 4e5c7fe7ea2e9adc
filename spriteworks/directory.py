"""Directory listing."""

from spriteworks.engine_file import EngineFile
from spriteworks.enginepath import EnginePath

__all__ = ["EngineDirectory"]


class EngineDirectory(EnginePath):
    """A directory path that can list its files and subdirectories."""

    def get_all_file(self, is_recursive=True):
        """Files in this directory; with is_recursive, files of subdirectories too."""
        return list(self._iter_files(self.path, is_recursive))

    def get_all_directory(self):
        """Immediate subdirectories."""
        return [EngineDirectory(entry) for entry in self._entries(self.path) if entry.is_dir()]

    @staticmethod
    def _entries(path):
        return sorted(path.iterdir())

    def _iter_files(self, path, is_recursive):
        for entry in self._entries(path):
            if entry.is_dir():
                if is_recursive:
                    yield from self._iter_files(entry, True)
                continue
            yield EngineFile(entry)