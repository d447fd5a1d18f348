"""Logging setup for applications using duration_format"""

import logging
from typing import Optional, Union

from duration_format.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "duration_format"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a console handler to the package logger"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # Only one console handler, however often this is called
    if not any(getattr(handler, "_duration_format", False) for handler in logger.handlers):
        handler = logging.StreamHandler()  # Console output
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._duration_format = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
