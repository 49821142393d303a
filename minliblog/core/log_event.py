"""
Log event snapshot

The immutable payload handed to broadcast subscribers and writers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import threading

from minliblog.core.log_level import LogLevel


@dataclass(frozen=True)
class LogEvent:
    """
    One dispatched log call.

    The message is already formatted; no formatting arguments travel
    with the event.
    """

    logger_name: str
    timestamp: datetime
    level: LogLevel
    message: str
    exception: Optional[BaseException] = None
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "logger_name": self.logger_name,
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "exception": repr(self.exception) if self.exception is not None else None,
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
        }

    def __str__(self) -> str:
        """String representation."""
        line = (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:5}] "
            f"[{self.logger_name}] "
            f"{self.message}"
        )
        if self.exception is not None:
            line += f" | {type(self.exception).__name__}: {self.exception}"
        return line
