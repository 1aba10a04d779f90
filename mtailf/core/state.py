"""Per-file cursor and the FILLING -> STREAMING phase machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .buffer import LineBuffer
from .scanner import find_sentinel, rewind_distance

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Where a file is in its catch-up lifecycle."""

    FILLING = "filling"  # live edge not located yet; lines are buffered
    STREAMING = "streaming"  # edge known; new text is printed as it appears


@dataclass
class ChunkResult:
    """What one chunk did to a file's state."""

    output: List[bytes] = field(default_factory=list)
    hit_boundary: bool = False
    transitioned: bool = False


class FileTailState:
    """Track the read cursor, active delimiter and catch-up buffer of one file."""

    def __init__(
        self,
        name: str,
        *,
        capacity: Optional[int] = 10,
        delimiter: bytes = b"\n",
        sentinel: bytes = b"\x00",
        cursor: int = 0,
    ):
        self.name = name
        self.sentinel = sentinel
        self.line_delimiter = delimiter
        self.delimiter = delimiter
        self.cursor = cursor
        if capacity == 0:
            # Nothing to catch up on; print from the first chunk.
            self.phase = Phase.STREAMING
            self.buffer: Optional[LineBuffer] = None
        else:
            self.phase = Phase.FILLING
            self.buffer = LineBuffer(capacity)

    @property
    def streaming(self) -> bool:
        return self.phase is Phase.STREAMING

    def consume(self, chunk: bytes) -> ChunkResult:
        """Apply one chunk read at ``self.cursor`` and advance the cursor."""
        result = ChunkResult()
        if not chunk:
            return result

        start = self.cursor
        self.cursor += len(chunk)
        first_sentinel = find_sentinel(chunk, self.sentinel, len(chunk))

        if first_sentinel != 0:
            payload = chunk if first_sentinel is None else chunk[:first_sentinel]
            if self.phase is Phase.FILLING:
                self.buffer.enqueue(payload)
            else:
                result.output.append(payload)

        if chunk[-1:] != self.sentinel:
            return result

        result.hit_boundary = True
        if self.phase is Phase.FILLING:
            result.output.extend(self.buffer.drain())
            self.buffer = None
            self.phase = Phase.STREAMING
            result.transitioned = True
            logger.debug("%s: catch-up done, streaming from the padding edge", self.name)
        self.delimiter = self.sentinel

        self.cursor -= rewind_distance(chunk, self.sentinel)
        logger.debug(
            "%s: end marker %r found, cursor %d -> %d", self.name, self.sentinel, start, self.cursor
        )
        return result


__all__ = ["Phase", "ChunkResult", "FileTailState"]
