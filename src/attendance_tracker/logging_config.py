from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Attach one stdout handler to the package logger; safe to call repeatedly."""

    global _handler

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("attendance_tracker")
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(_handler)

    return logger
