"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from minliblog.core.log_event import LogEvent


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEvent objects into formatted strings.
    """

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Format a log event into a string.

        Args:
            event: The log event to format

        Returns:
            Formatted string representation of the log event
        """
        pass

    def __call__(self, event: LogEvent) -> str:
        """Allow formatters to be callable."""
        return self.format(event)
