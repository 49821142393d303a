"""
Log level enumeration

The ordinal of each level is handed to sinks as a plain integer,
so the numbering is fixed.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Severity of a log event.

    Ordinals are part of the sink contract (0..5) and must not change.
    """

    TRACE = 0       # Very detailed, development only
    DEBUG = 1       # Debugging information
    INFO = 2        # Normal operational messages
    WARN = 3        # Recoverable or temporary problems
    ERROR = 4       # Errors, usually with an exception attached
    FATAL = 5       # Very serious errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). WARNING and CRITICAL
                       are accepted as aliases of WARN and FATAL.

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
