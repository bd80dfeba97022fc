"""
people_explorer.core.log - Log setup
=====================================

The terminal belongs to the interactive UI, so log records go to a
rotating file under the configured log directory.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOGGER_NAME = "people_explorer"
LOG_FILE = "people-explorer.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "INFO", log_dir: Union[str, Path] = "logs") -> logging.Logger:
    """
    Attach a rotating file handler to the package logger.

    Calling this again replaces the previously installed handler.

    Returns
    -------
    logging.Logger
        The ``people_explorer`` logger
    """
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        if getattr(h, "_people_explorer", False):
            logger.removeHandler(h)
            h.close()

    handler = RotatingFileHandler(path / LOG_FILE, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._people_explorer = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level if isinstance(level, int) else level.upper())
    logger.propagate = False
    return logger
