from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from mtailf import config as mtailf_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep user config files and MTAILF_* variables out of every test."""
    for key in (
        "MTAILF_LINES",
        "MTAILF_DELAY",
        "MTAILF_DELIMITER",
        "MTAILF_SENTINEL",
        "MTAILF_QUIET",
        "MTAILF_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("MTAILF_CONFIG", str(tmp_path / "missing.toml"))
    monkeypatch.setattr(mtailf_config, "_config", None)
    yield


@pytest.fixture
def padded_file(tmp_path: Path) -> Callable[..., Path]:
    """Create a pre-allocated file filled with ``fill`` bytes."""

    def _make(name: str = "app.log", size: int = 4096, fill: bytes = b"\x00") -> Path:
        path = tmp_path / name
        path.write_bytes(fill * size)
        return path

    return _make


def _write_at(path: Path, offset: int, data: bytes) -> int:
    with open(path, "r+b") as f:
        f.seek(offset)
        f.write(data)
    return offset + len(data)


@pytest.fixture
def write_at() -> Callable[[Path, int, bytes], int]:
    """Overwrite bytes in place, like a logger printing into a mapped region."""
    return _write_at


@pytest.fixture(autouse=True)
def reset_mtailf_logging():
    yield
    logger = logging.getLogger("mtailf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
