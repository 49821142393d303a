"""Sink callable that rebuilds LogEvents for writers"""

from datetime import datetime
from typing import Any, List, Optional, Sequence

from minliblog.core.log_event import LogEvent
from minliblog.core.log_level import LogLevel


class EventSink:
    """
    Sink bound to one logger name.

    Called with (timestamp, level, message, exception) like any sink.
    Drops events below min_level, then writes the event to every writer.
    Level filtering lives here, on the backend side, never in Logger.
    """

    def __init__(
        self,
        name: str,
        writers: Sequence[Any],
        min_level: Optional[LogLevel] = None
    ):
        """
        Initialize event sink.

        Args:
            name: Logger name stamped on the rebuilt events
            writers: Objects with a write(event) method
            min_level: Minimum level to write (inclusive). None writes all.
        """
        self.name = name
        self.writers: List[Any] = list(writers)
        self.min_level = LogLevel(min_level) if min_level is not None else None

    def should_write(self, level: int) -> bool:
        """Check if level passes the minimum level."""
        return self.min_level is None or level >= self.min_level

    def __call__(
        self,
        timestamp: datetime,
        level: int,
        message: str,
        exception: Optional[BaseException] = None
    ) -> None:
        if not self.should_write(level):
            return

        event = LogEvent(
            logger_name=self.name,
            timestamp=timestamp,
            level=LogLevel(level),
            message=message,
            exception=exception,
        )
        for writer in self.writers:
            writer.write(event)

    def __repr__(self) -> str:
        """String representation."""
        return f"EventSink(name={self.name!r}, writers={len(self.writers)}, min={self.min_level})"
