"""Process liveness check used for the ``-p`` stop condition."""

from __future__ import annotations

import psutil


def is_pid_alive(pid: int) -> bool:
    """Return True while ``pid`` names a running, non-zombie process.

    ``pid <= 0`` means nothing is being watched and always reports alive.
    """
    if pid <= 0:
        return True
    try:
        proc = psutil.Process(pid)
        if proc.status() == psutil.STATUS_ZOMBIE:
            return False
    except psutil.NoSuchProcess:
        return False
    except psutil.AccessDenied:
        # Exists, but owned by someone else.
        return True
    return proc.is_running()


__all__ = ["is_pid_alive"]
