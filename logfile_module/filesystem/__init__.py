"""Filesystem backends - storage used by LogFile"""

from logfile_module.filesystem.base_filesystem import BaseFileSystem
from logfile_module.filesystem.local_filesystem import LocalFileSystem
from logfile_module.filesystem.memory_filesystem import MemoryFileSystem

__all__ = ["BaseFileSystem", "LocalFileSystem", "MemoryFileSystem"]
