"""Writers module - Backend outputs for bundled providers"""

from minliblog.writers.console_writer import ConsoleWriter
from minliblog.writers.file_writer import FileWriter
from minliblog.writers.stdlib_writer import StdlibWriter

__all__ = ["ConsoleWriter", "FileWriter", "StdlibWriter"]
