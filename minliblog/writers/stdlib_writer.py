"""
Bridge to the standard library logging module

Forwards events to logging.getLogger(event.logger_name), keeping the
dispatch timestamp and the attached exception.
"""

import logging
from typing import Dict, Optional

from minliblog.core.log_event import LogEvent
from minliblog.core.log_level import LogLevel

TRACE_LEVEL = 5

DEFAULT_LEVEL_MAP: Dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}


class StdlibWriter:
    """Write log events as records of the standard logging module."""

    def __init__(self, level_map: Optional[Dict[LogLevel, int]] = None):
        """
        Initialize stdlib writer.

        Args:
            level_map: Mapping from LogLevel to logging levels
                       (default: DEFAULT_LEVEL_MAP)
        """
        self.level_map = dict(DEFAULT_LEVEL_MAP)
        if level_map:
            self.level_map.update(level_map)

        if logging.getLevelName(TRACE_LEVEL) == f"Level {TRACE_LEVEL}":
            logging.addLevelName(TRACE_LEVEL, "TRACE")

    def write(self, event: LogEvent):
        """Emit a LogRecord for the event if its logger is enabled for it."""
        std_logger = logging.getLogger(event.logger_name or None)
        std_level = self.level_map[event.level]
        if not std_logger.isEnabledFor(std_level):
            return

        exc_info = None
        if event.exception is not None:
            exc = event.exception
            exc_info = (type(exc), exc, exc.__traceback__)

        record = std_logger.makeRecord(
            std_logger.name,
            std_level,
            "(minliblog)",
            0,
            event.message,
            None,
            exc_info,
        )
        record.created = event.timestamp.timestamp()
        record.msecs = (record.created - int(record.created)) * 1000
        record.thread = event.thread_id
        record.threadName = event.thread_name
        std_logger.handle(record)

    def flush(self):
        """Flush handlers of the root logger."""
        for handler in logging.getLogger().handlers:
            handler.flush()
