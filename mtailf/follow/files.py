"""Open handles for the followed files."""

from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional, Sequence

from mtailf.core.state import FileTailState
from mtailf.errors import FileOpenError
from mtailf.follow.config import RunConfig

logger = logging.getLogger(__name__)


class TailedFile:
    """A followed path, its tail state and its (possibly closed) handle."""

    def __init__(self, path: str, state: FileTailState, handle: Optional[BinaryIO] = None):
        self.path = path
        self.state = state
        self.handle = handle

    @property
    def is_open(self) -> bool:
        return self.handle is not None and not self.handle.closed

    def ensure_open(self) -> BinaryIO:
        """Return an open handle, reopening the path if it was closed."""
        if self.is_open:
            return self.handle
        try:
            self.handle = open(self.path, "rb")
        except OSError as e:
            raise FileOpenError(self.path, e.strerror or str(e)) from e
        logger.debug("Opened %s at cursor %d", self.path, self.state.cursor)
        return self.handle

    def close(self) -> None:
        if self.handle is not None:
            self.handle.close()
            self.handle = None


def build_state(path: str, config: RunConfig) -> FileTailState:
    return FileTailState(
        path,
        capacity=config.buffer_capacity,
        delimiter=config.delimiter,
        sentinel=config.sentinel,
    )


def open_files(paths: Sequence[str], config: RunConfig) -> List[TailedFile]:
    """Open every path in order; on failure close what was opened and raise."""
    opened: List[TailedFile] = []
    for path in paths:
        tailed = TailedFile(path, build_state(path, config))
        try:
            tailed.ensure_open()
        except FileOpenError as e:
            logger.debug("%s", e)
            close_files(opened)
            raise
        except KeyboardInterrupt:
            close_files(opened)
            raise
        opened.append(tailed)
    return opened


def close_files(files: Sequence[TailedFile]) -> None:
    for tailed in reversed(files):
        tailed.close()


__all__ = ["TailedFile", "build_state", "open_files", "close_files"]
