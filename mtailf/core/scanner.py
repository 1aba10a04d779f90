"""Locate the boundary between written text and sentinel padding."""

from __future__ import annotations

from typing import Optional


def find_sentinel(chunk: bytes, sentinel: bytes, limit: Optional[int] = None) -> Optional[int]:
    """Return the index of the first ``sentinel`` in ``chunk[:limit]``, or None."""
    if limit is None:
        limit = len(chunk)
    index = chunk.find(sentinel, 0, max(limit, 0))
    return None if index < 0 else index


def rewind_distance(chunk: bytes, sentinel: bytes) -> int:
    """Bytes to step back so the next read starts at the first sentinel.

    A single read can straddle freshly written text and the original padding,
    so the cursor has to land on the first sentinel byte, not after the chunk.
    """
    index = find_sentinel(chunk, sentinel, len(chunk))
    if index is None:
        return 0
    return len(chunk) - index


__all__ = ["find_sentinel", "rewind_distance"]
