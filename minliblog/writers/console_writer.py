"""Console writer with ANSI colors"""

import sys
import threading

from minliblog.core.log_event import LogEvent


class ConsoleWriter:
    """Write log events to console with optional colors."""

    def __init__(self, colored: bool = True, stream=None, formatter=None):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stderr at write time)
            formatter: Log formatter (default: uses event's __str__)
        """
        self.colored = colored
        self.stream = stream
        self.formatter = formatter
        self._lock = threading.Lock()

    def write(self, event: LogEvent):
        """Write log event to console."""
        if self.formatter:
            msg = self.formatter.format(event)
        else:
            msg = str(event)

        if self.colored and not self.formatter:
            msg = f"{event.level.color_code}{msg}{event.level.reset_code}"

        stream = self.stream or sys.stderr
        with self._lock:
            stream.write(msg + "\n")
            stream.flush()

    def flush(self):
        """Flush stream."""
        (self.stream or sys.stderr).flush()
