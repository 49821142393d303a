"""
Logging context configuration

Controls how dispatch reports and isolates failing sinks and which
clock stamps events.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional
import sys


def print_error(source: str, error: BaseException) -> None:
    """Default error handler: report to stderr."""
    print(f"{source} error: {type(error).__name__}: {error}", file=sys.stderr)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ContextConfig:
    """
    Configuration of a LoggingContext.

    isolate_sink_errors: when True, an exception raised by a sink or a
        subscriber is passed to error_handler and the remaining deliveries
        continue. When False, the exception propagates to the log call.
    error_handler: receives (source, exception) for isolated sink and
        subscriber failures and for providers that fail while a new
        logger is created.
    clock: returns the dispatch timestamp.
    """

    isolate_sink_errors: bool = True
    error_handler: Optional[Callable[[str, BaseException], None]] = None
    clock: Callable[[], datetime] = field(default=datetime.now)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.error_handler is not None and not callable(self.error_handler):
            raise TypeError("error_handler must be callable")
        if not callable(self.clock):
            raise TypeError("clock must be callable")
        if self.error_handler is None:
            self.error_handler = print_error

    @classmethod
    def default(cls) -> "ContextConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def strict_config(cls) -> "ContextConfig":
        """Create configuration where sink failures reach the caller."""
        return cls(isolate_sink_errors=False)

    @classmethod
    def utc_config(cls) -> "ContextConfig":
        """Create configuration stamping events with UTC-aware timestamps."""
        return cls(clock=_utc_now)
