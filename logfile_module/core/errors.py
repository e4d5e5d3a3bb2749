"""
Error taxonomy for log file operations

Every error is raised synchronously to the caller. The auto_create,
auto_open and auto_close policy flags are the only way to have the
precondition healed instead.
"""


class LogFileError(Exception):
    """Base class for all log file errors."""


class MissingFileError(LogFileError, FileNotFoundError):
    """The operation needs the log file to exist and auto_create is off."""

    def __init__(self, path, action: str = "access"):
        self.path = path
        self.action = action
        super().__init__(f"Cannot {action} '{path}': log file does not exist")


class StreamOpenError(LogFileError):
    """The operation needs the write stream closed and auto_close is off."""

    def __init__(self, path, action: str = "modify"):
        self.path = path
        self.action = action
        super().__init__(
            f"Cannot {action} '{path}' while the write stream is open"
        )


class NotOpenError(LogFileError):
    """The operation needs an open write stream and auto_open is off."""

    def __init__(self, path, action: str = "write"):
        self.path = path
        self.action = action
        super().__init__(
            f"Cannot {action} '{path}': write stream is not open"
        )


class InvalidOptionError(LogFileError, TypeError):
    """A caller-supplied option failed its expected-type check."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid option '{key}': {reason}")
