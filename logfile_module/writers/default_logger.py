"""
Default logger pipeline

Prints an entry to the console and appends it to the log file. LogFile
calls the configured logger from ``LogFile.log``; this is the one used
unless another callable is configured.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from logfile_module.core.errors import NotOpenError
from logfile_module.core.events import LogEvent
from logfile_module.core.option_record import OptionRecord
from logfile_module.formatters.format_options import FormatOptions
from logfile_module.writers.console_writer import ConsoleWriter


@dataclass(frozen=True)
class LoggerOptions(OptionRecord):
    """
    Options for the default logger.

    Attributes:
        print_entry: Print the entry to the console
        print_raw: Print without escape sequences
        write: Write the entry to the log file
        write_raw: Write without escape sequences
        auto_create: Create the log file if missing
        auto_open: Open the write stream if closed
        recursive: Create missing parent directories recursively
    """

    KINDS = {
        "print_entry": bool,
        "print_raw": bool,
        "write": bool,
        "write_raw": bool,
        "auto_create": bool,
        "auto_open": bool,
        "recursive": bool,
    }

    print_entry: bool = True
    print_raw: bool = False
    write: bool = True
    write_raw: bool = True
    auto_create: bool = True
    auto_open: bool = True
    recursive: bool = True


@dataclass(frozen=True)
class LogRequest:
    """
    Payload of the LOG, LOG_PRINT and LOG_WRITE events.

    Attributes:
        entry: Entry options as passed to the logger
        options: Resolved logger options for this call
    """

    entry: Any
    options: LoggerOptions


def raw_entry(entry: Any) -> Any:
    """Return entry options with styling suppressed."""
    if isinstance(entry, FormatOptions):
        return entry.unstyled()
    if isinstance(entry, Mapping):
        return dict(entry, raw=True)
    if entry is None:
        return {"raw": True}
    return entry


def default_logger(log_file, entry: Any = None, *, console: Optional[ConsoleWriter] = None,
                   **options) -> None:
    """
    Print an entry to the console and write it to the log file.

    Args:
        log_file: LogFile to write to
        entry: Entry options for the log file's formatter
        console: Console sink (default: ConsoleWriter on stdout)
        **options: LoggerOptions overrides

    Raises:
        NotOpenError: If the stream is closed and auto_open is off
        InvalidOptionError: If an option is unknown or wrongly typed
    """
    settings = LoggerOptions().merge(options)

    if not log_file.online:
        if not settings.auto_open:
            raise NotOpenError(log_file.path, "log to")
        log_file.open(auto_create=settings.auto_create, recursive=settings.recursive)

    request = LogRequest(entry=entry, options=settings)
    log_file.events.emit(LogEvent.LOG, log_file, request)

    if settings.print_entry:
        log_file.events.emit(LogEvent.LOG_PRINT, log_file, request)
        rendered = log_file.format(raw_entry(entry) if settings.print_raw else entry)
        (console or ConsoleWriter()).write(rendered)

    if settings.write:
        log_file.events.emit(LogEvent.LOG_WRITE, log_file, request)
        log_file.write(
            raw_entry(entry) if settings.write_raw else entry,
            auto_create=settings.auto_create,
            auto_open=settings.auto_open,
            recursive=settings.recursive,
        )
