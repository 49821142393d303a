#!/usr/bin/env python3
"""
Sample application letting an operator pick the logging backend

The SampleComponent class stands in for library code: it only knows
minliblog, never the backend.
"""

import logging
import sys

import minliblog
from minliblog.formatters import JSONFormatter
from minliblog.providers import console_provider, file_provider, stdlib_provider


class SampleComponent:
    """Library class with a type-named logger."""

    def test_logging(self):
        _logger.trace("Test Trace message")
        _logger.debug("Test Debug message")
        _logger.info("Test Info message")
        _logger.warn("Test Warn message")
        _logger.error("Test Error message")
        _logger.fatal("Test Fatal message")


_logger = minliblog.get_logger_for(SampleComponent)


def on_event_logged(event):
    print(f"Logger.event_logged [{event.level}] {event.message}")


def stdlib_backend():
    logging.basicConfig(
        level=5,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    return stdlib_provider()


BACKENDS = {
    1: ("console", lambda: console_provider(colored=True)),
    2: ("stdlib logging", stdlib_backend),
    3: ("JSON file (logs/sample.jsonl)", lambda: file_provider("logs/sample.jsonl", formatter=JSONFormatter())),
}


def main():
    minliblog.subscribe(on_event_logged)

    print("0) None")
    for number, (label, _) in BACKENDS.items():
        print(f"{number}) {label}")
    choice = input("Select a logging backend (Enter 0-3): ")

    try:
        selected = int(choice)
    except ValueError:
        print("Not a number", file=sys.stderr)
        return 1

    provider = None
    if selected in BACKENDS:
        label, make_provider = BACKENDS[selected]
        print(f"{label} backend selected")
        provider = make_provider()
        minliblog.set_provider(provider)
    else:
        print("No logging backend selected")

    SampleComponent().test_logging()

    minliblog.set_provider(None)
    if provider is not None:
        provider.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
