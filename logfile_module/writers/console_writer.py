"""Console writer with optional ANSI stripping"""

import re
import sys

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class ConsoleWriter:
    """Write rendered entries to a console stream."""

    def __init__(self, stream=None, colored: bool = True):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout at write time)
            colored: Keep ANSI escape sequences; strip them when False
        """
        self._stream = stream
        self.colored = colored

    @property
    def stream(self):
        return sys.stdout if self._stream is None else self._stream

    def write(self, text: str) -> None:
        """Write rendered text to the console."""
        if not self.colored:
            text = ANSI_PATTERN.sub("", text)
        self.stream.write(text)
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleWriter(colored={self.colored})"
