"""Simple logging for the n26 client."""
import logging
import os
import sys


def get_logger(name: str = "n26") -> logging.Logger:
    """Get a console logger with configurable level.

    Only the root 'n26' logger gets a handler. Child loggers
    (e.g., 'n26.auth', 'n26.client') propagate to the root.
    """
    logger = logging.getLogger(name)

    # Child loggers propagate to the root handler, avoiding duplicate messages
    if name == "n26" and not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

        logger.setLevel(level)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))

        logger.addHandler(handler)

    return logger
