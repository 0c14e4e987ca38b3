"""Logging setup for the ``waypost`` command.

Library modules only create named loggers (``waypost.server``,
``waypost.data``); handlers are installed here, by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a stderr handler to the ``waypost`` logger at *level*.

    Calling it again replaces the previous handler instead of stacking.
    """
    logger = logging.getLogger("waypost")
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level: {level!r}"
        raise ValueError(msg)

    for existing in list(logger.handlers):
        if getattr(existing, "_waypost", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._waypost = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
