"""Ring buffer that keeps the last N lines seen while catching up on a file."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional

from ..errors import BufferDrainedError


class LineBuffer:
    """Store the most recent lines with overwrite-oldest semantics.

    ``capacity=None`` keeps every line (``-n +k`` replays from the start).
    The buffer is one-shot: after :meth:`drain` it refuses further writes.
    """

    def __init__(self, capacity: Optional[int] = 10):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._lines: deque[bytes] = deque(maxlen=capacity)
        self._drained = False

    def enqueue(self, line: bytes) -> None:
        if self._drained:
            raise BufferDrainedError("line buffer was already drained")
        if self.capacity == 0:
            return
        self._lines.append(line)

    def drain(self) -> List[bytes]:
        """Return retained lines oldest-first and close the buffer."""
        if self._drained:
            raise BufferDrainedError("line buffer was already drained")
        lines = list(self._lines)
        self._lines.clear()
        self._drained = True
        return lines

    @property
    def drained(self) -> bool:
        return self._drained

    @property
    def size(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[bytes]:
        return iter(list(self._lines))


__all__ = ["LineBuffer"]
