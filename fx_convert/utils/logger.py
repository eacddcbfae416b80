"""Logging utilities for the fx_convert package."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_CONFIGURED = False


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Install a stderr handler with a simple formatter (only once per process)."""

    global _CONFIGURED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    if not _CONFIGURED:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
        _CONFIGURED = True
    logging.getLogger("fx_convert").setLevel(level)


def get_logger(name: str = "fx_convert") -> logging.Logger:
    """Return a module-level logger below the ``fx_convert`` namespace."""

    return logging.getLogger(name)
