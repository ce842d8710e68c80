"""Logging configuration helpers."""

import logging

# Top-level packages whose module loggers share the application handler
APP_LOGGERS = ("pricebite", "api", "modules", "shared")


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging with a single stream handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        if logger.handlers:
            continue
        logger.addHandler(handler)
        logger.propagate = False
