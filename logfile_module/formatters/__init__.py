"""
Entry formatters module

Renders log entries as aligned, optionally ANSI-styled text.
"""

from logfile_module.formatters.base_formatter import BaseFormatter
from logfile_module.formatters.entry_formatter import (
    DEFAULT_FORMATTER,
    EntryFormatter,
    format_entry,
)
from logfile_module.formatters.format_options import FormatOptions, format_timestamp
from logfile_module.formatters.styling import Alignment, Style, pad, stylize

__all__ = [
    "BaseFormatter",
    "EntryFormatter",
    "DEFAULT_FORMATTER",
    "format_entry",
    "FormatOptions",
    "format_timestamp",
    "Alignment",
    "Style",
    "pad",
    "stylize",
]
