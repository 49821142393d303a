"""
JSON formatter for structured logging

Formats log events as JSON objects
"""

import json
import traceback
from typing import Optional

from minliblog.core.log_event import LogEvent
from minliblog.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log events as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_thread_info: bool = True,
        include_traceback: bool = False,
        indent: Optional[int] = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_thread_info: Include thread_id and thread_name
            include_traceback: Include the formatted traceback of an
                               attached exception
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per event)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_thread_info = include_thread_info
        self.include_traceback = include_traceback
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, event: LogEvent) -> str:
        """
        Format log event as JSON.

        Args:
            event: Log event to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": event.timestamp.isoformat(),
            "level": event.level.name,
            "message": event.message,
        }

        if event.logger_name:
            log_dict["logger"] = event.logger_name

        if self.include_thread_info:
            log_dict["thread_id"] = event.thread_id
            log_dict["thread_name"] = event.thread_name

        if event.exception is not None:
            exc = event.exception
            exception_info = {
                "type": type(exc).__name__,
                "message": str(exc),
            }
            if self.include_traceback:
                exception_info["traceback"] = "".join(
                    traceback.format_exception(type(exc), exc, exc.__traceback__)
                )
            log_dict["exception"] = exception_info

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
