"""
Python LogFile - a single-file logger

Manages the lifecycle of one log file and renders aligned, optionally
ANSI-styled entries into it.
"""

__version__ = "1.0.0"

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
from logfile_module.formatters.entry_formatter import EntryFormatter, format_entry
from logfile_module.formatters.format_options import FormatOptions
from logfile_module.formatters.styling import Alignment, Style
from logfile_module.writers.default_logger import LoggerOptions, default_logger

# Import submodules (not all classes by default)
from logfile_module import filesystem
from logfile_module import formatters
from logfile_module import writers

__all__ = [
    "LogFile",
    "LogOptions",
    "LoggerOptions",
    "LogEvent",
    "Notification",
    "EventDispatcher",
    "EntryFormatter",
    "FormatOptions",
    "Alignment",
    "Style",
    "format_entry",
    "default_logger",
    "LogFileError",
    "MissingFileError",
    "StreamOpenError",
    "NotOpenError",
    "InvalidOptionError",
    "filesystem",
    "formatters",
    "writers",
]
