"""Run configuration handed from the CLI to the poll loop."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mtailf.core.constants import (
    DEFAULT_DELAY,
    DEFAULT_DELIMITER,
    DEFAULT_LINES,
    DEFAULT_SENTINEL,
)


class RunConfig(BaseModel):
    """Immutable settings for one follow run."""

    model_config = ConfigDict(frozen=True)

    lines: int = Field(default=DEFAULT_LINES, ge=0, description="Catch-up line count (N)")
    from_start: bool = Field(
        default=False, description="Replay every existing line instead of the last N"
    )
    delay: float = Field(default=DEFAULT_DELAY, ge=0, description="Seconds between poll cycles")
    delimiter: bytes = Field(default=DEFAULT_DELIMITER, description="Line delimiter byte")
    sentinel: bytes = Field(default=DEFAULT_SENTINEL, description="Padding (end marker) byte")
    watch_pid: int = Field(default=0, ge=0, description="Stop once this pid exits (0 = never)")
    quiet: bool = Field(default=False, description="Suppress per-file headers")
    verbose: bool = Field(default=False, description="Debug diagnostics on stderr")
    paths: Tuple[str, ...] = Field(..., min_length=1, description="Files to follow, in order")

    @field_validator("delimiter", "sentinel")
    @classmethod
    def _single_byte(cls, value: bytes) -> bytes:
        if len(value) != 1:
            raise ValueError(f"expected exactly one byte, got {value!r}")
        return value

    @model_validator(mode="after")
    def _distinct_markers(self) -> "RunConfig":
        if self.delimiter == self.sentinel:
            raise ValueError("delimiter and sentinel must differ")
        return self

    @property
    def buffer_capacity(self) -> Optional[int]:
        return None if self.from_start else self.lines

    @property
    def show_headers(self) -> bool:
        return not self.quiet and len(self.paths) > 1


__all__ = ["RunConfig"]
