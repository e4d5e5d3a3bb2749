"""
Entry formatter with field alignment and ANSI styling

Renders ``timestamp | title | message`` lines, optionally styled.
"""

from typing import Optional

from logfile_module.formatters.base_formatter import BaseFormatter, EntryOptions
from logfile_module.formatters.format_options import FormatOptions, to_datetime
from logfile_module.formatters.styling import pad, stylize


class EntryFormatter(BaseFormatter):
    """
    Format entries as aligned, optionally styled text lines.

    The formatter is stateless apart from its defaults record, which is
    never mutated; every call merges its options over those defaults.

    Example:
        formatter = EntryFormatter()
        formatter.format({"title": "BOOT", "message": "ready"})

        # Plain text, no escape sequences
        formatter.format(title="BOOT", message="ready", raw=True)

        # Different defaults for every entry
        formatter = EntryFormatter(FormatOptions(separator=" :: "))
    """

    def __init__(self, defaults: Optional[FormatOptions] = None):
        """
        Initialize entry formatter.

        Args:
            defaults: Options applied before each call's overrides
        """
        self.defaults = defaults or FormatOptions()

    def resolve(self, entry: EntryOptions = None, **overrides) -> FormatOptions:
        """Merge entry options and overrides over the defaults."""
        if isinstance(entry, FormatOptions):
            base = entry
        else:
            base = self.defaults.merge(entry)
        return base.merge(overrides) if overrides else base

    def format(self, entry: EntryOptions = None, **overrides) -> str:
        """
        Format one entry.

        Args:
            entry: FormatOptions, a mapping of option overrides or None
            **overrides: Further option overrides

        Returns:
            Rendered entry ending with the terminator
        """
        options = self.resolve(entry, **overrides)

        timestamp = pad(
            options.timestamp_formatter(to_datetime(options.timestamp)),
            options.timestamp_min_width,
            options.timestamp_alignment,
            options.timestamp_padding,
        )
        title = pad(
            options.title,
            options.title_min_width,
            options.title_alignment,
            options.title_padding,
        )

        if options.raw:
            return options.separator.join([timestamp, title, options.message]) + options.end

        separator = stylize(options.separator, options.separator_style)
        fields = [
            stylize(timestamp, options.timestamp_style),
            stylize(title, options.title_style),
            stylize(options.message, options.message_style),
        ]
        return separator.join(fields) + options.end

    def __repr__(self) -> str:
        """String representation."""
        return f"EntryFormatter(separator={self.defaults.separator!r}, raw={self.defaults.raw})"


DEFAULT_FORMATTER = EntryFormatter()


def format_entry(entry: EntryOptions = None, **overrides) -> str:
    """Format one entry with the default formatter."""
    return DEFAULT_FORMATTER.format(entry, **overrides)
