"""Core constants for mtailf."""

# Bytes pulled from a file per read while looking for a delimiter
BUF_CHUNK_SIZE = 4096

DEFAULT_LINES = 10
DEFAULT_DELAY = 1.0
DEFAULT_DELIMITER = b"\n"
DEFAULT_SENTINEL = b"\x00"

HEADER_TEMPLATE = "\n==> {path} <==\n"

__all__ = [
    "BUF_CHUNK_SIZE",
    "DEFAULT_LINES",
    "DEFAULT_DELAY",
    "DEFAULT_DELIMITER",
    "DEFAULT_SENTINEL",
    "HEADER_TEMPLATE",
]
