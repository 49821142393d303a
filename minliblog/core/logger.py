"""
Logger - named handle that library code logs through

A Logger never decides where its events go. Its sink is assigned by the
owning LoggingContext from the current provider, and replaced whenever
the provider changes.
"""

from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from minliblog.core.log_level import LogLevel
from minliblog.core.log_event import LogEvent
from minliblog.core.message_format import format_message, split_exception

if TYPE_CHECKING:
    from minliblog.core.logging_context import LoggingContext

Sink = Callable[[datetime, int, str, Optional[BaseException]], None]


class Logger:
    """Named logger with leveled operations and dual dispatch."""

    def __init__(self, name: str, context: "LoggingContext", sink: Optional[Sink] = None):
        self._name = name
        self._context = context
        self._sink = sink

    @property
    def name(self) -> str:
        """Logger name."""
        return self._name

    @property
    def is_bound(self) -> bool:
        """True when a sink is currently bound."""
        return self._sink is not None

    @property
    def sink(self) -> Optional[Sink]:
        """The sink currently bound, or None."""
        return self._sink

    def _bind(self, sink: Optional[Sink]) -> None:
        # Single reference assignment; readers see either the old or new sink.
        self._sink = sink

    def log(
        self,
        level: Union[LogLevel, int],
        message: Any,
        *args: Any,
        exception: Optional[BaseException] = None,
    ) -> None:
        """
        Log a message at the given level.

        Args:
            level: LogLevel or its integer ordinal (0..5)
            message: Composite format string ({0}, {1}, ...)
            *args: Values substituted into message
            exception: Exception to attach to the event. It is never
                       interpolated into the message.
                       An exception passed as the first positional
                       argument is attached the same way when the
                       template has no placeholder left for it.

        Raises:
            ValueError: If level is not a valid ordinal
            MessageFormatError: If message cannot be formatted with args
        """
        level = LogLevel(level)

        sink = self._sink
        subscribers = self._context.subscribers
        if sink is None and not subscribers:
            return

        context = self._context
        timestamp = context.config.clock()
        args, exception = split_exception(message, args, exception)
        event = LogEvent(
            logger_name=self._name,
            timestamp=timestamp,
            level=level,
            message=format_message(message, args),
            exception=exception,
        )

        for subscriber in subscribers:
            context._deliver(f"Subscriber for logger '{self._name}'", subscriber, event)

        if sink is not None:
            context._deliver(
                f"Sink for logger '{self._name}'",
                sink,
                event.timestamp,
                int(event.level),
                event.message,
                event.exception,
            )

    def trace(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, *args, exception=exception)

    def debug(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, *args, exception=exception)

    def info(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, *args, exception=exception)

    def warn(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, *args, exception=exception)

    def error(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, *args, exception=exception)

    def fatal(self, message: Any, *args: Any, exception: Optional[BaseException] = None) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, *args, exception=exception)

    warning = warn
    critical = fatal

    def __repr__(self) -> str:
        state = "bound" if self._sink is not None else "unbound"
        return f"Logger(name={self._name!r}, {state})"
