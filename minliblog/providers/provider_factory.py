"""Factories for handler providers built on the bundled writers"""

from typing import Any, List, Optional, Sequence

from minliblog.core.log_level import LogLevel
from minliblog.providers.event_sink import EventSink
from minliblog.writers.console_writer import ConsoleWriter
from minliblog.writers.file_writer import FileWriter
from minliblog.writers.stdlib_writer import StdlibWriter


class WriterProvider:
    """
    Provider whose sinks write to a fixed set of shared writers.

    The provider owns its writers. After swapping it out with
    set_provider, call close() to release files it opened.
    """

    def __init__(self, writers: Sequence[Any], min_level: Optional[LogLevel] = None):
        if not writers:
            raise ValueError("writer_provider needs at least one writer")
        self.writers: List[Any] = list(writers)
        self.min_level = min_level

    def __call__(self, name: str) -> EventSink:
        return EventSink(name, self.writers, min_level=self.min_level)

    def flush(self) -> None:
        """Flush every writer that supports it."""
        for writer in self.writers:
            if hasattr(writer, "flush"):
                writer.flush()

    def close(self) -> None:
        """Close every writer that supports it."""
        for writer in self.writers:
            if hasattr(writer, "close"):
                writer.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"WriterProvider(writers={len(self.writers)}, min={self.min_level})"


def writer_provider(*writers: Any, min_level: Optional[LogLevel] = None) -> WriterProvider:
    """
    Build a provider whose sinks write to the given writers.

    Args:
        *writers: Objects with a write(event) method, shared by every logger
        min_level: Minimum level written by each sink

    Returns:
        WriterProvider mapping a logger name to an EventSink
    """
    return WriterProvider(writers, min_level=min_level)


def console_provider(
    colored: bool = True,
    stream=None,
    formatter=None,
    min_level: Optional[LogLevel] = None
) -> WriterProvider:
    """Build a provider writing every logger to the console."""
    return writer_provider(
        ConsoleWriter(colored=colored, stream=stream, formatter=formatter),
        min_level=min_level,
    )


def file_provider(
    filepath: str,
    formatter=None,
    min_level: Optional[LogLevel] = None,
    encoding: str = "utf-8"
) -> WriterProvider:
    """
    Build a provider writing every logger to one file.

    The file is opened here; call close() on the returned provider once
    it has been replaced.
    """
    return writer_provider(
        FileWriter(filepath, encoding=encoding, formatter=formatter),
        min_level=min_level,
    )


def stdlib_provider(min_level: Optional[LogLevel] = None, level_map=None) -> WriterProvider:
    """Build a provider forwarding to the standard logging module."""
    return writer_provider(StdlibWriter(level_map=level_map), min_level=min_level)


def null_provider(name: str) -> None:
    """Provider that leaves every logger unbound."""
    return None
