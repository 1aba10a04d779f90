"""Expand a filename pattern into the list of files to follow."""

from __future__ import annotations

import glob
import logging
from typing import List

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str) -> List[str]:
    """Return regular files matching ``pattern`` in sorted order."""
    matches = sorted(glob.glob(pattern))
    for i, path in enumerate(matches, start=1):
        logger.debug("glob %s: %d: %s", pattern, i, path)
    return matches


__all__ = ["expand_pattern"]
