"""
Core module for the logging layer

This module contains the fundamental classes:
- Logger: Named handle that library code logs through
- LoggingContext: Logger registry, provider slot and broadcast subscribers
- LogEvent: Immutable snapshot of one dispatched log call
- LogLevel: Log level enumeration
- ContextConfig: Dispatch and error reporting configuration
"""

from minliblog.core.logger import Logger
from minliblog.core.logging_context import LoggingContext
from minliblog.core.log_event import LogEvent
from minliblog.core.log_level import LogLevel
from minliblog.core.context_config import ContextConfig
from minliblog.core.errors import MinLibLogError, MessageFormatError, ProviderError

__all__ = [
    "Logger",
    "LoggingContext",
    "LogEvent",
    "LogLevel",
    "ContextConfig",
    "MinLibLogError",
    "MessageFormatError",
    "ProviderError",
]
