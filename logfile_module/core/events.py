"""
Lifecycle notifications

LogFile owns an EventDispatcher and notifies subscribers before and after
every state change. A subscriber raising from a BEFORE_* notification
aborts the operation; the exception reaches the caller unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Union


class LogEvent(str, Enum):
    """Named lifecycle events."""

    BEFORE_CREATE = "before_create"
    CREATE = "create"
    BEFORE_OPEN = "before_open"
    OPEN = "open"
    BEFORE_CLOSE = "before_close"
    CLOSE = "close"
    BEFORE_DELETE = "before_delete"
    DELETE = "delete"
    BEFORE_WRITE = "before_write"
    WRITE = "write"

    # Emitted by the default logger
    LOG = "log"
    LOG_PRINT = "log_print"
    LOG_WRITE = "log_write"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union["LogEvent", str]) -> "LogEvent":
        """
        Convert a member, value or name to LogEvent.

        Raises:
            ValueError: If value names no event
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            if isinstance(value, str) and value.upper() in cls.__members__:
                return cls[value.upper()]
            raise ValueError(f"Unknown log event: {value!r}") from None


@dataclass(frozen=True)
class Notification:
    """
    One delivered event.

    Attributes:
        event: The event being delivered
        source: Object that emitted it (the LogFile)
        payload: Event data: a path, a stream, entry options or rendered text
    """

    event: LogEvent
    source: Any
    payload: Any = None


Callback = Callable[[Notification], Any]


class EventDispatcher:
    """
    Registry of callbacks per event.

    Callbacks run synchronously in registration order.

    Example:
        dispatcher = EventDispatcher()
        dispatcher.on(LogEvent.WRITE, lambda n: print(n.payload, end=""))
        dispatcher.emit(LogEvent.WRITE, log_file, "line\\n")
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._callbacks: Dict[LogEvent, List[Callback]] = {}
        self._once: Dict[LogEvent, List[Callback]] = {}

    def on(self, event: Union[LogEvent, str], callback: Callback) -> Callback:
        """
        Register a callback for an event.

        Args:
            event: Event or its name
            callback: Function taking a Notification

        Returns:
            The registered callback

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callbacks.setdefault(LogEvent.from_value(event), []).append(callback)
        return callback

    def once(self, event: Union[LogEvent, str], callback: Callback) -> Callback:
        """Register a callback removed after its first delivery."""
        event = LogEvent.from_value(event)
        self.on(event, callback)
        self._once.setdefault(event, []).append(callback)
        return callback

    def off(self, event: Union[LogEvent, str], callback: Callback) -> bool:
        """
        Unregister a callback.

        Returns:
            True if the callback was registered, False otherwise
        """
        event = LogEvent.from_value(event)
        callbacks = self._callbacks.get(event, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        pending = self._once.get(event, [])
        if callback in pending:
            pending.remove(callback)
        return True

    def clear(self, event: Union[LogEvent, str, None] = None) -> None:
        """Remove callbacks for one event, or for all events."""
        if event is None:
            self._callbacks.clear()
            self._once.clear()
            return
        event = LogEvent.from_value(event)
        self._callbacks.pop(event, None)
        self._once.pop(event, None)

    def listeners(self, event: Union[LogEvent, str]) -> List[Callback]:
        """Get the callbacks registered for an event."""
        return list(self._callbacks.get(LogEvent.from_value(event), []))

    def emit(self, event: LogEvent, source: Any, payload: Any = None) -> Notification:
        """
        Deliver an event to its callbacks.

        Exceptions raised by callbacks propagate to the emitter's caller.

        Returns:
            The delivered notification
        """
        notification = Notification(event=event, source=source, payload=payload)
        for callback in list(self._callbacks.get(event, [])):
            if callback in self._once.get(event, []):
                self.off(event, callback)
            callback(notification)
        return notification

    def __len__(self) -> int:
        return sum(len(callbacks) for callbacks in self._callbacks.values())
