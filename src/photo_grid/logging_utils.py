"""
Centralized logging utilities for the photo grid package.

Every module imports the shared ``logger`` defined here so that verbosity
can be controlled from one place (the CLI flips it to DEBUG for
``--verbose``).
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Configure a named logger once and return it.

    Repeated calls with the same name return the same instance without
    stacking extra handlers.

    Args:
        name: Logger name, typically set to __name__.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler.

    Returns:
        A configured logger instance.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        if handler is None:
            handler = logging.StreamHandler()
        handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance


def set_verbosity(*, verbose: bool) -> None:
    """Switch the shared logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger("photo_grid")
