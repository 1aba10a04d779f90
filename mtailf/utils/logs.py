"""Diagnostic logging to stderr."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING", verbose: bool = False, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the ``mtailf`` logger; ``verbose`` forces DEBUG."""
    logger = logging.getLogger("mtailf")
    resolved = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        if getattr(handler, "_mtailf", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._mtailf = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logging", "LOG_FORMAT"]
