"""Delimiter-bounded reads from an open binary file."""

from __future__ import annotations

from typing import BinaryIO, List

from .constants import BUF_CHUNK_SIZE


def read_chunk(
    handle: BinaryIO, offset: int, delimiter: bytes, block_size: int = BUF_CHUNK_SIZE
) -> bytes:
    """Read from ``offset`` up to and including ``delimiter``, or to end of file.

    Returns ``b""`` when nothing lies past ``offset``.
    """
    handle.seek(offset)
    parts: List[bytes] = []
    while True:
        block = handle.read(block_size)
        if not block:
            break
        index = block.find(delimiter)
        if index >= 0:
            parts.append(block[: index + 1])
            break
        parts.append(block)
    return b"".join(parts)


__all__ = ["read_chunk"]
