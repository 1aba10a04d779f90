"""Standard output writer with per-file section headers."""

from __future__ import annotations

import sys
from typing import BinaryIO, Iterable, Optional

from mtailf.core.constants import HEADER_TEMPLATE


class OutputWriter:
    """Write followed bytes unchanged, emitting a header whenever the source file changes."""

    def __init__(self, stream: Optional[BinaryIO] = None, *, show_headers: bool = False):
        self.stream = stream if stream is not None else sys.stdout.buffer
        self.show_headers = show_headers
        self.last_printed: Optional[int] = None

    def write(self, index: int, path: str, payloads: Iterable[bytes]) -> bool:
        """Write ``payloads`` for file ``index``; return True if anything was written."""
        wrote = False
        for payload in payloads:
            if not payload:
                continue
            if self.show_headers and self.last_printed != index:
                header = HEADER_TEMPLATE.format(path=path)
                self.stream.write(header.encode("utf-8", errors="surrogateescape"))
            self.last_printed = index
            self.stream.write(payload)
            wrote = True
        if wrote:
            self.stream.flush()
        return wrote


__all__ = ["OutputWriter"]
