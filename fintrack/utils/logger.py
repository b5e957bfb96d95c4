"""
Logging for the fintrack package.

Only the ``fintrack`` logger gets a handler, so the API and the client log
to stdout without touching the root logger of the host application.
"""

import logging
import os
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_PACKAGE_LOGGER = "fintrack"
_handler_attached = False


def _attach_handler(level=None) -> None:
    global _handler_attached
    if _handler_attached:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level or os.getenv("LOG_LEVEL", "INFO").upper())
    package_logger.addHandler(handler)
    _handler_attached = True


def configure_logging(level: str) -> None:
    """Apply the app's ``LOG_LEVEL`` to everything under ``fintrack``."""
    _attach_handler(level.upper())
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    # modules pass __name__, which always sits under the package logger
    _attach_handler()
    return logging.getLogger(name)
