"""Exceptions raised by the logging layer"""

from typing import Any, Tuple


class MinLibLogError(Exception):
    """Base class for minliblog errors."""


class MessageFormatError(MinLibLogError, ValueError):
    """A log message could not be formatted with the supplied arguments."""

    def __init__(self, message_template: str, args: Tuple[Any, ...], reason: str):
        super().__init__(
            f"Cannot format log message {message_template!r} "
            f"with {len(args)} argument(s): {reason}"
        )
        self.message_template = message_template
        self.format_args = args


class ProviderError(MinLibLogError):
    """The handler provider failed to resolve a sink for a logger."""

    def __init__(self, logger_name: str, reason: str):
        super().__init__(f"Provider failed for logger {logger_name!r}: {reason}")
        self.logger_name = logger_name
