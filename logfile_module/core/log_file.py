"""
LogFile - lifecycle of a single log file

Owns one path, at most one open write stream and a validated options
record. Every state change notifies subscribers before and after it
happens.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Any, Callable, Mapping, Optional, Union

from logfile_module.core.errors import (
    InvalidOptionError,
    MissingFileError,
    NotOpenError,
    StreamOpenError,
)
from logfile_module.core.events import Callback, EventDispatcher, LogEvent
from logfile_module.core.log_options import LogOptions
from logfile_module.filesystem.base_filesystem import BaseFileSystem
from logfile_module.filesystem.local_filesystem import LocalFileSystem

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class LogFile:
    """
    A log file with an explicit create/open/close/delete lifecycle.

    Operations check their preconditions before doing anything. When a
    precondition fails, the matching policy flag (auto_create, auto_open,
    auto_close) decides whether it is healed or reported as an error.
    Keyword overrides passed to an operation apply to that call only.

    Example:
        log = LogFile("logs/latest.log")
        log.on(LogEvent.WRITE, lambda n: print(n.payload, end=""))
        log.write({"title": "BOOT", "message": "ready"})
        log.close()

    Limitations:
        A LogFile is meant to be used from a single thread. Several
        instances or processes writing to the same path are not coordinated.
    """

    def __init__(
        self,
        path: PathLike,
        options: Union[None, LogOptions, Mapping[str, Any]] = None,
        filesystem: Optional[BaseFileSystem] = None,
    ):
        """
        Initialize a log file.

        Args:
            path: File path, relative to the working directory or absolute
            options: LogOptions or a mapping of option values
            filesystem: Storage backend (default: LocalFileSystem)
        """
        self._filesystem = filesystem or LocalFileSystem()
        self._stream: Optional[IO[str]] = None
        self._options = LogOptions()
        self.events = EventDispatcher()
        self.path = path
        self.options = options

    # Properties

    @property
    def path(self) -> str:
        """Absolute, normalized file path."""
        return self._path

    @path.setter
    def path(self, path: PathLike) -> None:
        """
        Change the file path.

        Raises:
            StreamOpenError: If the stream is open and auto_close is off
        """
        resolved = os.path.abspath(os.fspath(path))
        if self.online:
            if not self._options.auto_close:
                raise StreamOpenError(self._path, "move")
            self.close()
        self._path = resolved

    @property
    def options(self) -> LogOptions:
        """Current options."""
        return self._options

    @options.setter
    def options(self, options: Union[None, LogOptions, Mapping[str, Any]]) -> None:
        """
        Replace the options.

        Values of the wrong type fall back to their defaults.

        Raises:
            InvalidOptionError: If options is not a mapping or has unknown keys
        """
        if isinstance(options, LogOptions):
            self._options = options
        else:
            self._options = LogOptions.from_mapping(options)

    @property
    def formatter(self) -> Callable[..., str]:
        """Configured entry formatter."""
        return self._options.formatter

    @formatter.setter
    def formatter(self, formatter: Callable[..., str]) -> None:
        if not callable(formatter):
            raise InvalidOptionError("formatter", "must be callable")
        self._options = self._options.merge(formatter=formatter)

    @property
    def logger(self) -> Callable[..., None]:
        """Configured logger."""
        return self._options.logger

    @logger.setter
    def logger(self, log_function: Callable[..., None]) -> None:
        if not callable(log_function):
            raise InvalidOptionError("logger", "must be callable")
        self._options = self._options.merge(logger=log_function)

    @property
    def filesystem(self) -> BaseFileSystem:
        return self._filesystem

    @property
    def stream(self) -> Optional[IO[str]]:
        """Open write stream, or None."""
        return self._stream

    @property
    def online(self) -> bool:
        """True if the write stream is open."""
        return self._stream is not None and not self._stream.closed

    @property
    def exists(self) -> bool:
        """True if the file exists; checked on every access."""
        return self._filesystem.exists(self._path)

    @property
    def content(self) -> str:
        """
        Current content of the file.

        Raises:
            MissingFileError: If the file does not exist
        """
        if not self.exists:
            raise MissingFileError(self._path, "read")
        return self._filesystem.read_text(self._path, self._options.encoding)

    # Subscriptions

    def on(self, event: Union[LogEvent, str], callback: Callback) -> "LogFile":
        """Register a callback for an event."""
        self.events.on(event, callback)
        return self

    def once(self, event: Union[LogEvent, str], callback: Callback) -> "LogFile":
        """Register a callback for the next occurrence of an event."""
        self.events.once(event, callback)
        return self

    def off(self, event: Union[LogEvent, str], callback: Callback) -> "LogFile":
        """Unregister a callback."""
        self.events.off(event, callback)
        return self

    def _emit(self, event: LogEvent, payload: Any = None) -> None:
        self.events.emit(event, self, payload)

    # Lifecycle

    def create(self, **overrides) -> "LogFile":
        """
        Create the file if it does not exist.

        Missing parent directories are created, recursively when the
        recursive option is set.

        Args:
            **overrides: LogOptions overrides for this call

        Returns:
            Self for method chaining
        """
        options = self._options.merge(overrides)
        if self.exists:
            return self

        self._emit(LogEvent.BEFORE_CREATE, self._path)
        directory = os.path.dirname(self._path)
        if not self._filesystem.is_dir(directory):
            self._filesystem.make_dirs(directory, recursive=options.recursive)
        self._filesystem.create_file(self._path)
        logger.debug("Created log file %s", self._path)
        self._emit(LogEvent.CREATE, self._path)
        return self

    def open(self, **overrides) -> "LogFile":
        """
        Open the write stream.

        Existing content is kept unless the truncate option is set.

        Args:
            **overrides: LogOptions overrides for this call

        Returns:
            Self for method chaining

        Raises:
            MissingFileError: If the file is missing and auto_create is off
        """
        options = self._options.merge(overrides)
        if not self.exists:
            if not options.auto_create:
                raise MissingFileError(self._path, "open")
            self.create(**overrides)
        if self.online:
            return self

        self._emit(LogEvent.BEFORE_OPEN, self._path)
        self._stream = self._filesystem.open_append(
            self._path, truncate=options.truncate, encoding=options.encoding
        )
        logger.debug("Opened log stream for %s (truncate=%s)", self._path, options.truncate)
        self._emit(LogEvent.OPEN, self._stream)
        return self

    def close(self, missing_ok: bool = False) -> "LogFile":
        """
        Close the write stream.

        Args:
            missing_ok: Do nothing instead of raising when no stream is open

        Returns:
            Self for method chaining

        Raises:
            NotOpenError: If no stream is open and missing_ok is False
        """
        if not self.online:
            self._stream = None
            if missing_ok:
                return self
            raise NotOpenError(self._path, "close")

        self._emit(LogEvent.BEFORE_CLOSE, self._stream)
        self._stream.close()
        self._stream = None
        logger.debug("Closed log stream for %s", self._path)
        self._emit(LogEvent.CLOSE, self._path)
        return self

    def delete(self, missing_ok: bool = False, **overrides) -> "LogFile":
        """
        Delete the file.

        Args:
            missing_ok: Do nothing instead of raising when the file is missing
            **overrides: LogOptions overrides for this call

        Returns:
            Self for method chaining

        Raises:
            MissingFileError: If the file is missing and missing_ok is False
            StreamOpenError: If the stream is open and auto_close is off
        """
        options = self._options.merge(overrides)
        if not self.exists:
            if missing_ok:
                return self
            raise MissingFileError(self._path, "delete")
        if self.online and not options.auto_close:
            raise StreamOpenError(self._path, "delete")

        self._emit(LogEvent.BEFORE_DELETE, self._path)
        if self.online:
            self.close()
        self._filesystem.delete(self._path)
        logger.debug("Deleted log file %s", self._path)
        self._emit(LogEvent.DELETE, self._path)
        return self

    # Entries

    def format(self, entry: Any = None, *formatter_args) -> str:
        """Render an entry with the configured formatter without writing it."""
        return self._options.formatter(entry, *formatter_args)

    def write(self, entry: Any = None, *formatter_args, **overrides) -> "LogFile":
        """
        Render an entry and append it to the file.

        Both preconditions are checked and the entry is rendered before
        anything is created or opened, so a failed write leaves the file
        and stream untouched.

        Args:
            entry: Entry options passed to the formatter
            *formatter_args: Extra positional arguments for the formatter
            **overrides: LogOptions overrides for this call

        Returns:
            Self for method chaining

        Raises:
            MissingFileError: If the file is missing and auto_create is off
            NotOpenError: If the stream must be opened and auto_open is off
            InvalidOptionError: If the entry options are invalid
        """
        options = self._options.merge(overrides)
        missing = not self.exists
        if missing and not options.auto_create:
            raise MissingFileError(self._path, "write to")
        # A stream left open on a removed file is stale and must be reopened
        stale = missing and self.online
        if (stale or not self.online) and not options.auto_open:
            raise NotOpenError(self._path, "write to")

        text = options.formatter(entry, *formatter_args)

        if stale:
            self.close()
        if not self.online:
            self.open(**overrides)

        self._emit(LogEvent.BEFORE_WRITE, entry)
        self._stream.write(text)
        self._stream.flush()
        self._emit(LogEvent.WRITE, text)
        return self

    def log(self, entry: Any = None, **logger_options) -> "LogFile":
        """
        Log an entry through the configured logger.

        With the default logger the entry is printed to the console and
        written to the file; see ``default_logger`` for its options.

        Returns:
            Self for method chaining
        """
        self._options.logger(self, entry, **logger_options)
        return self

    def read(self, binary: bool = True, encoding: Optional[str] = None) -> IO:
        """
        Open a new read handle over the file.

        The handle is independent of the write stream; closing it is the
        caller's responsibility.

        Raises:
            MissingFileError: If the file does not exist
        """
        if not self.exists:
            raise MissingFileError(self._path, "read")
        if self.online:
            self._stream.flush()
        return self._filesystem.open_read(self._path, binary=binary, encoding=encoding)

    def __enter__(self) -> "LogFile":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close(missing_ok=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"LogFile(path={self._path!r}, online={self.online})"
