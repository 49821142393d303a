"""
Providers module

Ready-made handler providers backed by the bundled writers. Any function
mapping a logger name to a sink callable works as a provider; these are
conveniences for applications that do not bring their own backend.

Example:
    import minliblog
    from minliblog.providers import console_provider

    minliblog.set_provider(console_provider(min_level=minliblog.LogLevel.INFO))
"""

from minliblog.providers.event_sink import EventSink
from minliblog.providers.provider_factory import (
    WriterProvider,
    writer_provider,
    console_provider,
    file_provider,
    stdlib_provider,
    null_provider,
)

__all__ = [
    "EventSink",
    "WriterProvider",
    "writer_provider",
    "console_provider",
    "file_provider",
    "stdlib_provider",
    "null_provider",
]
