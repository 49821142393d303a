#!/usr/bin/env python3
"""Basic usage example"""

import minliblog
from minliblog import LogLevel
from minliblog.providers import console_provider

# Library code: a module-level logger, created before any backend exists
logger = minliblog.get_logger("example.library")


def do_work():
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Processed {0} items in {1:.2f}s", 42, 0.517)
    logger.warn("This is warning")
    try:
        {}["missing"]
    except KeyError as e:
        logger.error("Lookup failed for {0}", "missing", exception=e)
    logger.fatal("This is fatal")


def main():
    # Nothing installed yet: the calls cost a pair of checks
    do_work()

    # Application code picks the backend; the cached logger follows
    minliblog.set_provider(console_provider(colored=True, min_level=LogLevel.DEBUG))
    do_work()

    minliblog.set_provider(None)


if __name__ == "__main__":
    main()
