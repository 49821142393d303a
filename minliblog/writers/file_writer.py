"""File writer"""

from pathlib import Path
import threading

from minliblog.core.log_event import LogEvent


class FileWriter:
    """Write log events to a file shared by every logger bound to it."""

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter=None
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: uses event's __str__)
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.formatter = formatter
        self._file = None
        self._lock = threading.Lock()
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def write(self, event: LogEvent):
        """Write log event to file."""
        if self.formatter:
            msg = self.formatter.format(event)
        else:
            msg = str(event)
        with self._lock:
            if self._file:
                self._file.write(msg + "\n")

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
