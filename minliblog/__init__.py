"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

minliblog - A minimal logging indirection layer for Python libraries

Libraries log through named loggers; the application decides, and may
later change, which backend receives the events.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from minliblog.core.logger import Logger
from minliblog.core.logging_context import (
    LoggingContext,
    get_default_context,
    reset_default_context,
    get_logger,
    get_logger_for,
    set_provider,
    get_provider,
    subscribe,
    unsubscribe,
)
from minliblog.core.log_event import LogEvent
from minliblog.core.log_level import LogLevel
from minliblog.core.context_config import ContextConfig
from minliblog.core.errors import MinLibLogError, MessageFormatError, ProviderError

# Import submodules (not all classes by default)
from minliblog import formatters
from minliblog import providers
from minliblog import writers

__all__ = [
    "Logger",
    "LoggingContext",
    "LogEvent",
    "LogLevel",
    "ContextConfig",
    "MinLibLogError",
    "MessageFormatError",
    "ProviderError",
    "get_default_context",
    "reset_default_context",
    "get_logger",
    "get_logger_for",
    "set_provider",
    "get_provider",
    "subscribe",
    "unsubscribe",
    "formatters",
    "providers",
    "writers",
]
