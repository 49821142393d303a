"""
Text formatter with customizable template

Formats log events using a template string with named placeholders
"""

from typing import Optional

from minliblog.core.log_event import LogEvent
from minliblog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log events using a customizable template.

    Supports placeholders for all LogEvent fields.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:5}] [{logger}] {message}{exception}"

    def __init__(self, template: Optional[str] = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Log level name
                     - {level_value}: Log level ordinal
                     - {message}: Log message
                     - {logger}: Logger name
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
                     - {exception}: " | Type: text" when an exception is attached,
                                    otherwise empty
            timestamp_format: strftime format for timestamps

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, event: LogEvent) -> str:
        """
        Format log event using the template.

        Args:
            event: Log event to format

        Returns:
            Formatted string
        """
        timestamp_str = event.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]  # Milliseconds

        exception_str = ""
        if event.exception is not None:
            exception_str = f" | {type(event.exception).__name__}: {event.exception}"

        format_dict = {
            "timestamp": timestamp_str,
            "level": event.level.name,
            "level_value": int(event.level),
            "message": event.message,
            "logger": event.logger_name,
            "thread": event.thread_name,
            "thread_id": event.thread_id,
            "exception": exception_str,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {event.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
