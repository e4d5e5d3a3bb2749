"""
Core module for the log file

This module contains the fundamental classes:
- LogFile: Log file lifecycle and entry writing
- LogOptions: Validated log file options
- EventDispatcher: Lifecycle notifications
- Error taxonomy raised by LogFile operations
"""

from logfile_module.core.errors import (
    LogFileError,
    MissingFileError,
    StreamOpenError,
    NotOpenError,
    InvalidOptionError,
)
from logfile_module.core.events import LogEvent, Notification, EventDispatcher
from logfile_module.core.log_options import LogOptions
from logfile_module.core.log_file import LogFile

__all__ = [
    "LogFile",
    "LogOptions",
    "LogEvent",
    "Notification",
    "EventDispatcher",
    "LogFileError",
    "MissingFileError",
    "StreamOpenError",
    "NotOpenError",
    "InvalidOptionError",
]
