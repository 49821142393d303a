"""
Event metrics collection
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional
import threading

from minliblog.core.log_event import LogEvent
from minliblog.core.log_level import LogLevel


@dataclass
class EventMetrics:
    """
    Counts of dispatched log events.

    sink_errors is only filled when the collector's error_handler is
    installed as the context error handler.
    """

    total_events: int = 0
    events_by_level: Dict[LogLevel, int] = field(default_factory=dict)
    events_by_logger: Dict[str, int] = field(default_factory=dict)
    events_with_exception: int = 0
    sink_errors: int = 0

    started_at: Optional[datetime] = None
    last_event_at: Optional[datetime] = None

    def to_dict(self) -> Dict:
        """
        Convert to dictionary for JSON export.

        Returns:
            Dictionary representation of metrics
        """
        return {
            "total_events": self.total_events,
            "events_by_level": {k.name: v for k, v in self.events_by_level.items()},
            "events_by_logger": dict(self.events_by_logger),
            "events_with_exception": self.events_with_exception,
            "sink_errors": self.sink_errors,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "last_event_at": self.last_event_at.isoformat() if self.last_event_at else None,
        }


class MetricsCollector:
    """
    Thread-safe subscriber that counts dispatched events.

    Register it with LoggingContext.subscribe (it is callable with a
    LogEvent), and optionally pass error_handler to ContextConfig to
    count isolated sink failures.
    """

    def __init__(self):
        self._metrics = EventMetrics(started_at=datetime.now())
        self._lock = threading.Lock()

    def __call__(self, event: LogEvent) -> None:
        self.record_event(event)

    def record_event(self, event: LogEvent) -> None:
        """
        Record a dispatched event.

        Args:
            event: The event delivered to subscribers
        """
        with self._lock:
            self._metrics.total_events += 1
            self._metrics.events_by_level[event.level] = (
                self._metrics.events_by_level.get(event.level, 0) + 1
            )
            self._metrics.events_by_logger[event.logger_name] = (
                self._metrics.events_by_logger.get(event.logger_name, 0) + 1
            )
            if event.exception is not None:
                self._metrics.events_with_exception += 1
            self._metrics.last_event_at = event.timestamp

    def error_handler(self, source: str, error: BaseException) -> None:
        """Count a sink or subscriber failure (ContextConfig.error_handler)."""
        with self._lock:
            self._metrics.sink_errors += 1

    def get_metrics(self) -> EventMetrics:
        """
        Get current metrics snapshot.

        Returns:
            Copy of current EventMetrics
        """
        with self._lock:
            return EventMetrics(
                total_events=self._metrics.total_events,
                events_by_level=dict(self._metrics.events_by_level),
                events_by_logger=dict(self._metrics.events_by_logger),
                events_with_exception=self._metrics.events_with_exception,
                sink_errors=self._metrics.sink_errors,
                started_at=self._metrics.started_at,
                last_event_at=self._metrics.last_event_at,
            )

    def reset(self) -> None:
        """Reset all metrics to initial values."""
        with self._lock:
            self._metrics = EventMetrics(started_at=datetime.now())
