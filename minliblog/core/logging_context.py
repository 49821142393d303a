"""
LoggingContext - logger registry, provider slot and broadcast subscribers

A context owns all the mutable state shared by the loggers it creates.
The module keeps one default context for the process; the module-level
functions at the bottom of this file operate on it.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple
import threading

from minliblog.core.context_config import ContextConfig, print_error
from minliblog.core.errors import ProviderError
from minliblog.core.log_event import LogEvent
from minliblog.core.logger import Logger, Sink

Provider = Callable[[str], Optional[Sink]]
Subscriber = Callable[[LogEvent], None]


def _same_provider(a: Optional[Provider], b: Optional[Provider]) -> bool:
    if a is b:
        return True
    # Bound methods are recreated on each attribute access.
    if hasattr(a, "__self__") and hasattr(a, "__func__"):
        return a == b
    return False


def type_logger_name(obj: Any) -> str:
    """
    Return the fully qualified name used for a type's logger.

    Args:
        obj: A class, or an instance whose class is used

    Returns:
        "module.QualName", without a "builtins." prefix
    """
    cls = obj if isinstance(obj, type) else type(obj)
    module = getattr(cls, "__module__", None)
    if not module or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


class LoggingContext:
    """
    Registry of named loggers plus the provider they are bound through.

    Every logger is created once per name and lives as long as the
    context. Changing the provider rebinds every registered logger
    before set_provider returns.
    """

    def __init__(self, config: Optional[ContextConfig] = None):
        self._config = config or ContextConfig.default()
        self._lock = threading.RLock()
        self._loggers: Dict[str, Logger] = {}
        self._provider: Optional[Provider] = None
        self._subscribers: Tuple[Subscriber, ...] = ()

    @property
    def config(self) -> ContextConfig:
        """Context configuration."""
        return self._config

    @property
    def provider(self) -> Optional[Provider]:
        """The current handler provider, or None."""
        return self._provider

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        """Snapshot of the broadcast subscribers in registration order."""
        return self._subscribers

    @property
    def has_subscribers(self) -> bool:
        """True if at least one broadcast subscriber is registered."""
        return bool(self._subscribers)

    # Registry

    def get_logger(self, name: Optional[str] = None) -> Logger:
        """
        Return the logger registered under name, creating it on first use.

        Args:
            name: Logger name. None is treated as "".

        Returns:
            The same Logger instance for every call with the same name
        """
        name = "" if name is None else str(name)

        logger = self._loggers.get(name)
        if logger is not None:
            return logger

        failure: Optional[ProviderError] = None
        with self._lock:
            logger = self._loggers.get(name)
            if logger is not None:
                return logger

            logger = Logger(name, self)
            self._loggers[name] = logger
            if self._provider is not None:
                try:
                    logger._bind(self._resolve_sink(self._provider, name))
                except ProviderError as e:
                    failure = e

        if failure is not None:
            self._report(f"Provider for logger '{name}'", failure)
        return logger

    def get_logger_for(self, obj: Any) -> Logger:
        """
        Return the logger named after a type.

        Args:
            obj: A class, or an instance whose class is used

        Returns:
            get_logger(type_logger_name(obj))
        """
        return self.get_logger(type_logger_name(obj))

    def loggers(self) -> List[Logger]:
        """Snapshot of registered loggers in creation order."""
        with self._lock:
            return list(self._loggers.values())

    def __len__(self) -> int:
        return len(self._loggers)

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    # Provider

    def get_provider(self) -> Optional[Provider]:
        """Return the current handler provider."""
        return self._provider

    def set_provider(self, provider: Optional[Provider]) -> None:
        """
        Install a handler provider and rebind every registered logger.

        Setting the provider that is already installed does nothing.

        Args:
            provider: Function mapping a logger name to its sink, or None
                      to unbind every logger

        Raises:
            TypeError: If provider is neither callable nor None
            ProviderError: If the provider fails for a logger. That logger
                           and every logger not yet rebound are left
                           unbound; the new provider stays installed.
        """
        if provider is not None and not callable(provider):
            raise TypeError("provider must be callable or None")

        with self._lock:
            if _same_provider(provider, self._provider):
                return

            self._provider = provider
            failure: Optional[ProviderError] = None

            for logger in list(self._loggers.values()):
                if provider is None or failure is not None:
                    logger._bind(None)
                    continue
                try:
                    logger._bind(self._resolve_sink(provider, logger.name))
                except ProviderError as e:
                    logger._bind(None)
                    failure = e

            if failure is not None:
                raise failure

    @staticmethod
    def _resolve_sink(provider: Provider, name: str) -> Optional[Sink]:
        try:
            sink = provider(name)
        except Exception as e:
            raise ProviderError(name, f"{type(e).__name__}: {e}") from e

        if sink is not None and not callable(sink):
            raise ProviderError(name, f"provider returned non-callable {type(sink).__name__}")
        return sink

    # Broadcast subscribers

    def subscribe(self, callback: Subscriber) -> None:
        """
        Register a broadcast subscriber.

        Subscribers receive every dispatched LogEvent, in registration
        order, whether or not a sink is bound.

        Args:
            callback: Callable taking a LogEvent
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        with self._lock:
            self._subscribers = self._subscribers + (callback,)

    def unsubscribe(self, callback: Subscriber) -> bool:
        """
        Remove the most recent registration of a subscriber.

        Returns:
            True if a registration was removed, False if none was found
        """
        with self._lock:
            subscribers = list(self._subscribers)
            for index in range(len(subscribers) - 1, -1, -1):
                if subscribers[index] == callback:
                    del subscribers[index]
                    self._subscribers = tuple(subscribers)
                    return True
            return False

    # Dispatch

    def _deliver(self, source: str, target: Callable[..., None], *args: Any) -> None:
        if not self._config.isolate_sink_errors:
            target(*args)
            return

        try:
            target(*args)
        except Exception as e:
            self._report(source, e)

    def _report(self, source: str, error: BaseException) -> None:
        try:
            self._config.error_handler(source, error)
        except Exception as handler_error:
            print_error(source, error)
            print_error("Error handler", handler_error)

    # Lifecycle

    def reset(self, config: Optional[ContextConfig] = None) -> None:
        """
        Clear the provider and subscribers and unbind every logger.

        Registered loggers stay registered, so handles cached before the
        reset are still the ones get_logger returns and they follow the
        next set_provider.

        Args:
            config: Replacement configuration (keeps the current one if None)
        """
        with self._lock:
            for logger in self._loggers.values():
                logger._bind(None)
            self._provider = None
            self._subscribers = ()
            if config is not None:
                self._config = config

    def __repr__(self) -> str:
        return (
            f"LoggingContext(loggers={len(self._loggers)}, "
            f"provider={'set' if self._provider is not None else 'none'}, "
            f"subscribers={len(self._subscribers)})"
        )


_default_context = LoggingContext()


def get_default_context() -> LoggingContext:
    """Return the process-wide context."""
    return _default_context


def reset_default_context(config: Optional[ContextConfig] = None) -> LoggingContext:
    """Reset the process-wide context (for tests) and return it."""
    _default_context.reset(config)
    return _default_context


def get_logger(name: Optional[str] = None) -> Logger:
    """Return the process-wide logger for name."""
    return _default_context.get_logger(name)


def get_logger_for(obj: Any) -> Logger:
    """Return the process-wide logger named after a type."""
    return _default_context.get_logger_for(obj)


def set_provider(provider: Optional[Provider]) -> None:
    """Install the process-wide handler provider."""
    _default_context.set_provider(provider)


def get_provider() -> Optional[Provider]:
    """Return the process-wide handler provider."""
    return _default_context.get_provider()


def subscribe(callback: Subscriber) -> None:
    """Register a process-wide broadcast subscriber."""
    _default_context.subscribe(callback)


def unsubscribe(callback: Subscriber) -> bool:
    """Remove a process-wide broadcast subscriber."""
    return _default_context.unsubscribe(callback)
