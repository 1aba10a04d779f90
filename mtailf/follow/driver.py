"""Poll loop that scans every followed file once per cycle."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from mtailf.core.reader import read_chunk
from mtailf.follow.config import RunConfig
from mtailf.follow.files import TailedFile
from mtailf.follow.output import OutputWriter
from mtailf.utils.pids import is_pid_alive

logger = logging.getLogger(__name__)


class PollCycleDriver:
    """Drive reads, phase changes and output for a fixed list of files."""

    def __init__(
        self,
        files: Sequence[TailedFile],
        config: RunConfig,
        *,
        output: Optional[OutputWriter] = None,
        sleep: Optional[Callable[[float], None]] = None,
        pid_alive: Optional[Callable[[int], bool]] = None,
    ):
        self.files: List[TailedFile] = list(files)
        self.config = config
        self.output = output or OutputWriter(show_headers=config.show_headers)
        self._sleep = sleep or time.sleep
        self._pid_alive = pid_alive or is_pid_alive

    def scan_files(self) -> bool:
        """Read every file up to its current edge. Returns True if anything was printed.

        Raises:
            FileOpenError: If a closed handle cannot be reopened.
        """
        for tailed in self.files:
            tailed.ensure_open()

        printed = False
        for index, tailed in enumerate(self.files):
            printed |= self._scan_file(index, tailed)
        return printed

    def _scan_file(self, index: int, tailed: TailedFile) -> bool:
        state = tailed.state
        printed = False
        while True:
            try:
                chunk = read_chunk(tailed.handle, state.cursor, state.delimiter)
            except OSError as e:
                logger.debug("%s: read failed at cursor %d: %s", tailed.path, state.cursor, e)
                tailed.close()
                break
            if not chunk:
                break
            logger.debug("%s: %d bytes read at cursor %d", tailed.path, len(chunk), state.cursor)

            result = state.consume(chunk)
            printed |= self.output.write(index, tailed.path, result.output)
            if result.hit_boundary:
                # Pause until the next cycle before looking past the edge again.
                break
        return printed

    def should_stop(self) -> bool:
        pid = self.config.watch_pid
        if not pid:
            return False
        logger.debug("Checking pid:%d is alive", pid)
        return not self._pid_alive(pid)

    def run_cycle(self) -> bool:
        """Scan all files, wait ``delay`` seconds, then report whether to stop."""
        self.scan_files()
        self._sleep(self.config.delay)
        return self.should_stop()

    def run(self) -> None:
        while not self.run_cycle():
            pass
        logger.debug("Stop condition met, leaving poll loop")


__all__ = ["PollCycleDriver"]
