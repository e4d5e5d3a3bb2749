"""
Entry format options

Per-call options for EntryFormatter. Nothing here is persisted; each call
merges its options over a defaults record.
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from logfile_module.core.errors import InvalidOptionError
from logfile_module.formatters.styling import Alignment, StyleSpec

Timestamp = Union[datetime, int, float]


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as a short US date with a medium time.

    Example: ``10/19/26, 6:16:00 PM``
    """
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{value.month}/{value.day}/{value.strftime('%y')}, "
        f"{hour}:{value.strftime('%M:%S')} {meridiem}"
    )


def to_datetime(value: Optional[Timestamp]) -> datetime:
    """Resolve a timestamp option; numbers are POSIX seconds, None is now."""
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        return value
    return datetime.fromtimestamp(value)


def _is_style_spec(value: Any) -> bool:
    if value is None or isinstance(value, (int, str)):
        return True
    if not isinstance(value, (list, tuple)):
        return False
    for item in value:
        if isinstance(item, (list, tuple)):
            if not all(isinstance(code, (int, str)) for code in item):
                return False
        elif not isinstance(item, (int, str)):
            return False
    return True


@dataclass(frozen=True)
class FormatOptions:
    """
    Options controlling how one entry is rendered.

    Timestamp and title each have their own alignment, minimum width and
    padding. Timestamp, title, message and separator each carry an
    independent style spec; ``raw`` suppresses every style.
    """

    # Timestamp field
    timestamp: Optional[Timestamp] = None
    timestamp_formatter: Callable[[datetime], str] = format_timestamp
    timestamp_alignment: Alignment = Alignment.LEFT
    timestamp_min_width: int = 25
    timestamp_padding: str = " "
    timestamp_style: StyleSpec = (1, 94)

    # Title field
    title: str = "TITLE"
    title_alignment: Alignment = Alignment.LEFT
    title_min_width: int = 20
    title_padding: str = " "
    title_style: StyleSpec = (1, 93)

    # Message and separator
    message: str = "MESSAGE"
    message_style: StyleSpec = 92
    separator: str = " | "
    separator_style: StyleSpec = (1, 90)

    # Output
    end: str = "\n"
    raw: bool = False

    def __post_init__(self):
        """Validate and normalize options after initialization."""
        for name in ("timestamp_alignment", "title_alignment"):
            try:
                alignment = Alignment.from_value(getattr(self, name))
            except InvalidOptionError as e:
                raise InvalidOptionError(name, e.reason) from None
            object.__setattr__(self, name, alignment)

        for name in ("timestamp_min_width", "title_min_width"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidOptionError(name, "must be an integer")
            if value < 0:
                raise InvalidOptionError(name, "cannot be negative")

        for name in ("timestamp_padding", "title", "title_padding",
                     "message", "separator", "end"):
            if not isinstance(getattr(self, name), str):
                raise InvalidOptionError(name, "must be a string")

        for name in ("timestamp_style", "title_style", "message_style", "separator_style"):
            if not _is_style_spec(getattr(self, name)):
                raise InvalidOptionError(
                    name, "must be a code or a sequence of codes or code groups"
                )

        if self.timestamp is not None and (
            isinstance(self.timestamp, bool)
            or not isinstance(self.timestamp, (datetime, int, float))
        ):
            raise InvalidOptionError("timestamp", "must be a datetime or POSIX seconds")
        if isinstance(self.timestamp, (int, float)):
            try:
                datetime.fromtimestamp(self.timestamp)
            except (ValueError, OverflowError, OSError):
                raise InvalidOptionError(
                    "timestamp", f"{self.timestamp!r} is out of range"
                ) from None
        if not callable(self.timestamp_formatter):
            raise InvalidOptionError("timestamp_formatter", "must be callable")
        if not isinstance(self.raw, bool):
            raise InvalidOptionError("raw", "must be a boolean")

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """
        Create format options from a mapping.

        Args:
            data: Option names and values; missing keys take defaults

        Returns:
            New FormatOptions instance

        Raises:
            InvalidOptionError: On unknown keys or wrongly typed values
        """
        return cls().merge(data)

    def merge(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs) -> "FormatOptions":
        """
        Return a copy with the overrides applied.

        Args:
            overrides: Mapping of option overrides
            **kwargs: Further overrides, applied after the mapping

        Returns:
            New FormatOptions instance
        """
        if overrides is not None and not isinstance(overrides, Mapping):
            raise InvalidOptionError("options", "expected a mapping of format options")
        changes = dict(overrides or {}, **kwargs)
        unknown = set(changes) - self.field_names()
        if unknown:
            raise InvalidOptionError(
                sorted(unknown)[0], "not a format option"
            )
        return replace(self, **changes)

    def unstyled(self) -> "FormatOptions":
        """Return a copy rendered without any escape sequences."""
        return replace(self, raw=True)
