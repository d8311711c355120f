"""
Logger factory for consistent application logging.
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level: int = logging.INFO) -> Any:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, typically __name__ from the caller.
        level: Logging level applied to the logger. Defaults to INFO.

    Returns:
        A configured logging.Logger instance.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
