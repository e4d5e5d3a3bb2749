"""
In-process filesystem backend

Keeps files as text in a dictionary. Useful for tests and for callers that
want a LogFile without touching the disk.
"""

import io
import os
from typing import IO, Dict, Optional, Set

from logfile_module.filesystem.base_filesystem import BaseFileSystem


class _MemoryWriteHandle(io.StringIO):
    """Text handle that commits its content to the backend on flush."""

    def __init__(self, filesystem: "MemoryFileSystem", path: str, initial: str):
        super().__init__()
        self._filesystem = filesystem
        self._path = path
        self._initial = initial

    def flush(self) -> None:
        # Writes to a removed file are lost, as with an unlinked file on disk
        if not self.closed and self._path in self._filesystem.files:
            self._filesystem.files[self._path] = self._initial + self.getvalue()
        super().flush()

    def close(self) -> None:
        if not self.closed:
            self.flush()
        super().close()


class MemoryFileSystem(BaseFileSystem):
    """
    Storage backend held in memory.

    Example:
        fs = MemoryFileSystem()
        log = LogFile("logs/app.log", filesystem=fs)
        log.write({"message": "hi"})
        fs.files[log.path]
    """

    def __init__(self, files: Optional[Dict[str, str]] = None):
        """
        Initialize memory filesystem.

        Args:
            files: Initial files by absolute path; their directories are created
        """
        self.files: Dict[str, str] = {}
        self.dirs: Set[str] = set()
        for path, content in (files or {}).items():
            self.make_dirs(os.path.dirname(path))
            self.files[path] = content

    def exists(self, path: str) -> bool:
        return path in self.files

    def is_dir(self, path: str) -> bool:
        return path in self.dirs or os.path.dirname(path) == path

    def make_dirs(self, path: str, recursive: bool = True) -> None:
        if self.is_dir(path):
            return
        parent = os.path.dirname(path)
        if not self.is_dir(parent):
            if not recursive:
                raise FileNotFoundError(f"No such directory: '{parent}'")
            self.make_dirs(parent, recursive=True)
        self.dirs.add(path)

    def create_file(self, path: str) -> None:
        if not self.is_dir(os.path.dirname(path)):
            raise FileNotFoundError(f"No such directory: '{os.path.dirname(path)}'")
        self.files.setdefault(path, "")

    def open_append(self, path: str, truncate: bool = False, encoding: str = "utf-8") -> IO[str]:
        self.create_file(path)
        if truncate:
            self.files[path] = ""
        return _MemoryWriteHandle(self, path, self.files[path])

    def open_read(self, path: str, binary: bool = True, encoding: Optional[str] = None) -> IO:
        content = self.read_text(path)
        if binary:
            return io.BytesIO(content.encode(encoding or "utf-8"))
        return io.StringIO(content)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{path}'") from None

    def delete(self, path: str) -> None:
        if self.files.pop(path, None) is None:
            raise FileNotFoundError(f"No such file: '{path}'")

    def __repr__(self) -> str:
        return f"MemoryFileSystem(files={len(self.files)})"
