"""Following NUL-padded files across poll cycles."""

from __future__ import annotations

from mtailf.follow.config import RunConfig
from mtailf.follow.driver import PollCycleDriver
from mtailf.follow.files import TailedFile, close_files, open_files
from mtailf.follow.output import OutputWriter

__all__ = [
    "RunConfig",
    "PollCycleDriver",
    "TailedFile",
    "OutputWriter",
    "open_files",
    "close_files",
]
