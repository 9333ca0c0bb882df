"""Logging setup for the sipcalc service."""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER = "sipcalc"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the ``sipcalc`` logger once; later calls only set the level."""
    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if not any(getattr(handler, "_sipcalc", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._sipcalc = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
