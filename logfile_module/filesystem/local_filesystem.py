"""Host filesystem backend"""

from pathlib import Path
from typing import IO, Optional

from logfile_module.filesystem.base_filesystem import BaseFileSystem


class LocalFileSystem(BaseFileSystem):
    """Storage backend on the local disk."""

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def make_dirs(self, path: str, recursive: bool = True) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def create_file(self, path: str) -> None:
        Path(path).touch()

    def open_append(self, path: str, truncate: bool = False, encoding: str = "utf-8") -> IO[str]:
        return open(path, "w" if truncate else "a", encoding=encoding)

    def open_read(self, path: str, binary: bool = True, encoding: Optional[str] = None) -> IO:
        if binary:
            return open(path, "rb")
        return open(path, "r", encoding=encoding or "utf-8")

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def delete(self, path: str) -> None:
        Path(path).unlink()

    def __repr__(self) -> str:
        return "LocalFileSystem()"
