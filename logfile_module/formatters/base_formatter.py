"""
Base formatter interface

Formatters turn entry options into one terminated line of text.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from logfile_module.formatters.format_options import FormatOptions

EntryOptions = Union[None, FormatOptions, Mapping[str, Any]]


class BaseFormatter(ABC):
    """
    Abstract base class for entry formatters.

    Any callable taking entry options and returning a string can serve as a
    LogFile formatter; subclasses of this class are such callables.
    """

    @abstractmethod
    def format(self, entry: EntryOptions = None, **overrides) -> str:
        """
        Format an entry into a string.

        Args:
            entry: FormatOptions, a mapping of option overrides or None
            **overrides: Further option overrides

        Returns:
            Formatted entry including its terminator
        """
        pass

    def __call__(self, entry: EntryOptions = None, *args, **overrides) -> str:
        """
        Allow formatters to be callable.

        Extra positional arguments passed through LogFile.write are accepted
        and ignored; subclasses that need them override this method.
        """
        return self.format(entry, **overrides)
