"""Writers module - Console output and the default logger"""

from logfile_module.writers.console_writer import ConsoleWriter
from logfile_module.writers.default_logger import LoggerOptions, LogRequest, default_logger

__all__ = ["ConsoleWriter", "LoggerOptions", "LogRequest", "default_logger"]
