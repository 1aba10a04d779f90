"""Exception types raised by mtailf."""

from __future__ import annotations


class MtailfError(Exception):
    """Base class for mtailf errors."""


class FileOpenError(MtailfError):
    """A followed file could not be opened for reading."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error opening {path} for reading: {reason}")
        self.path = path
        self.reason = reason


class BufferDrainedError(MtailfError):
    """A line buffer was written to or drained after it had been drained."""


__all__ = ["MtailfError", "FileOpenError", "BufferDrainedError"]
