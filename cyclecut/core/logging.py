"""Logging for the cyclecut package, driven by CycleCutSettings.log_level."""
import logging
from typing import Optional

from .config import CycleCutSettings

PACKAGE_LOGGER = "cyclecut"
LOG_FORMAT = "%(asctime)s  %(name)-34s  %(levelname)-7s  %(message)s"


def setup_logging(settings: Optional[CycleCutSettings] = None) -> logging.Logger:
    """
    Set the level of the package logger from settings and return it.

    A stream handler is attached once, so repeated calls (one per
    CycleCutCalculator) only adjust the level. Module loggers under
    `cyclecut.` inherit it.
    """
    settings = settings or CycleCutSettings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if not any(getattr(h, "_cyclecut", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._cyclecut = True
        logger.addHandler(handler)
    return logger
