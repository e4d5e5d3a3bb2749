"""
Field alignment, padding and ANSI styling primitives

Used by EntryFormatter to lay out and color individual entry fields.
"""

from enum import Enum, IntEnum
from typing import Sequence, Union

from logfile_module.core.errors import InvalidOptionError

ESCAPE = "\033["
RESET = "\033[0m"

StyleCode = Union[int, str]
StyleSpec = Union[None, StyleCode, Sequence[Union[StyleCode, Sequence[StyleCode]]]]


class Alignment(Enum):
    """Horizontal alignment of a padded field."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union["Alignment", str]) -> "Alignment":
        """
        Convert a member or a name to Alignment.

        Args:
            value: Alignment member or name (case-insensitive)

        Returns:
            Alignment enum value

        Raises:
            InvalidOptionError: If value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        raise InvalidOptionError("alignment", f"expected LEFT or RIGHT, got {value!r}")


class Style(IntEnum):
    """Common SGR codes, usable anywhere a style code is accepted."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


def pad(text: str, width: int, alignment: Union[Alignment, str] = Alignment.LEFT,
        padding: str = " ") -> str:
    """
    Pad text to a minimum width.

    RIGHT alignment pads at the start, LEFT at the end. A multi-character
    padding string is repeated and cut to fit; an empty one leaves the text
    as is.

    Args:
        text: Field text
        width: Minimum width of the result
        alignment: Field alignment
        padding: Padding string

    Returns:
        Padded text
    """
    missing = width - len(text)
    if missing <= 0 or not padding:
        return text
    fill = (padding * (missing // len(padding) + 1))[:missing]
    if Alignment.from_value(alignment) is Alignment.RIGHT:
        return fill + text
    return text + fill


def _code_text(code) -> str:
    # str() of an IntEnum member is its name on older interpreters
    if isinstance(code, int):
        return str(int(code))
    return str(code)


def style_sequence(style: StyleSpec) -> str:
    """
    Build the opening escape sequence for a style spec.

    A scalar code is a single directive. In a sequence every item is one
    directive and a nested sequence is joined with ';' into one directive.

    Args:
        style: Style spec

    Returns:
        Concatenated escape directives, empty for an empty spec
    """
    if style is None:
        return ""
    if isinstance(style, (int, str)):
        return f"{ESCAPE}{_code_text(style)}m"
    directives = []
    for item in style:
        if isinstance(item, (list, tuple)):
            directives.append(";".join(_code_text(code) for code in item))
        else:
            directives.append(_code_text(item))
    return "".join(f"{ESCAPE}{directive}m" for directive in directives)


def is_unstyled(style: StyleSpec) -> bool:
    """True when the spec leaves text untouched (None or empty sequence)."""
    if style is None:
        return True
    return not isinstance(style, (int, str)) and len(style) == 0


def stylize(text: str, style: StyleSpec) -> str:
    """
    Wrap text in a style and a reset.

    An empty spec returns the text without any escape bytes, while a
    non-empty one always closes with a reset, even for code 0.
    """
    if is_unstyled(style):
        return text
    return f"{style_sequence(style)}{text}{RESET}"
