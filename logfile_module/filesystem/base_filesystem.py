"""
Filesystem capability interface

LogFile performs all storage access through this interface, so any
backend implementing it can stand in for the host filesystem.
"""

from abc import ABC, abstractmethod
from typing import IO, Optional


class BaseFileSystem(ABC):
    """Abstract storage backend for a LogFile."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file exists at path."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether a directory exists at path."""
        pass

    @abstractmethod
    def make_dirs(self, path: str, recursive: bool = True) -> None:
        """
        Create a directory.

        Args:
            path: Directory to create
            recursive: Also create missing parents
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """Create an empty file; its directory must exist."""
        pass

    @abstractmethod
    def open_append(self, path: str, truncate: bool = False, encoding: str = "utf-8") -> IO[str]:
        """
        Open a text write handle.

        Args:
            path: File to open
            truncate: Discard existing content instead of appending to it
            encoding: Text encoding

        Returns:
            Writable text handle with write/flush/close and a ``closed`` flag
        """
        pass

    @abstractmethod
    def open_read(self, path: str, binary: bool = True, encoding: Optional[str] = None) -> IO:
        """Open a new read handle over the file's content."""
        pass

    @abstractmethod
    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read the whole file as text."""
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """Remove a file."""
        pass
