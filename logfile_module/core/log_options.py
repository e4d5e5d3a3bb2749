"""
Log file configuration

Validated, immutable options record for LogFile.
"""

from dataclasses import dataclass
from typing import Callable

from logfile_module.core.option_record import CALLABLE, OptionRecord
from logfile_module.formatters.entry_formatter import DEFAULT_FORMATTER
from logfile_module.writers.default_logger import default_logger


@dataclass(frozen=True)
class LogOptions(OptionRecord):
    """
    Log file options.

    Policy flags let an operation heal its own precondition instead of
    raising: auto_create creates a missing file, auto_open opens a closed
    stream and auto_close closes an open one.
    """

    KINDS = {
        "auto_create": bool,
        "auto_open": bool,
        "auto_close": bool,
        "recursive": bool,
        "truncate": bool,
        "encoding": str,
        "formatter": CALLABLE,
        "logger": CALLABLE,
    }

    # Lifecycle policy
    auto_create: bool = True
    auto_open: bool = True
    auto_close: bool = True

    # File settings
    recursive: bool = True
    truncate: bool = False
    encoding: str = "utf-8"

    # Rendering
    formatter: Callable[..., str] = DEFAULT_FORMATTER
    logger: Callable[..., None] = default_logger

    @classmethod
    def default(cls) -> "LogOptions":
        """Create default options."""
        return cls()

    @classmethod
    def strict(cls) -> "LogOptions":
        """Create options where every precondition must already hold."""
        return cls(auto_create=False, auto_open=False, auto_close=False)

    @classmethod
    def fresh(cls) -> "LogOptions":
        """Create options that start every opened stream on an empty file."""
        return cls(truncate=True)
