"""
Shared behaviour for typed option records

Option records are frozen dataclasses whose fields each have an expected
kind and a default. Lenient construction substitutes the default for a
value of the wrong kind; strict merging rejects it.
"""

import logging
from dataclasses import MISSING, fields, replace
from typing import Any, Dict, Mapping, Optional

from logfile_module.core.errors import InvalidOptionError

logger = logging.getLogger(__name__)

# Marks a field whose value must be callable rather than an instance of a type
CALLABLE = object()


def matches(kind: Any, value: Any) -> bool:
    """Check a value against an expected kind."""
    if kind is CALLABLE:
        return callable(value)
    if kind is int and isinstance(value, bool):
        return False
    return isinstance(value, kind)


def kind_name(kind: Any) -> str:
    if kind is CALLABLE:
        return "callable"
    return kind.__name__


class OptionRecord:
    """
    Mixin for frozen option dataclasses.

    Subclasses declare ``KINDS``, a mapping from field name to the expected
    type (or CALLABLE).
    """

    KINDS: Dict[str, Any] = {}

    def __post_init__(self):
        """Validate every field against its expected kind."""
        for name, kind in self.KINDS.items():
            value = getattr(self, name)
            if not matches(kind, value):
                raise InvalidOptionError(
                    name, f"expected {kind_name(kind)}, got {type(value).__name__}"
                )

    @classmethod
    def _field_defaults(cls) -> Dict[str, Any]:
        defaults = {}
        for f in fields(cls):
            if f.default is not MISSING:
                defaults[f.name] = f.default
            elif f.default_factory is not MISSING:
                defaults[f.name] = f.default_factory()
        return defaults

    @classmethod
    def _check_keys(cls, data: Any) -> None:
        if not isinstance(data, Mapping):
            raise InvalidOptionError(
                "options", f"expected a mapping, got {type(data).__name__}"
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidOptionError(unknown[0], f"not a {cls.__name__} field")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None):
        """
        Build a record field by field.

        A value of the wrong kind is replaced by the field default.

        Args:
            data: Option names and values; missing keys take defaults

        Returns:
            New record instance

        Raises:
            InvalidOptionError: If data is not a mapping or has unknown keys
        """
        data = {} if data is None else data
        cls._check_keys(data)
        defaults = cls._field_defaults()
        parsed = {}
        for name, default in defaults.items():
            if name not in data:
                continue
            value = data[name]
            if matches(cls.KINDS.get(name, object), value):
                parsed[name] = value
            else:
                logger.warning(
                    "Option %r expects %s, got %s; using default %r",
                    name, kind_name(cls.KINDS[name]), type(value).__name__, default,
                )
        return cls(**parsed)

    def merge(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs):
        """
        Return a copy with per-call overrides applied.

        Overrides always win and are never stored on this record.

        Raises:
            InvalidOptionError: On unknown keys or wrongly typed values
        """
        if overrides is not None:
            self._check_keys(overrides)
        changes = dict(overrides or {}, **kwargs)
        if not changes:
            return self
        self._check_keys(changes)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
