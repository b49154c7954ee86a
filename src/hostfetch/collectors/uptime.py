"""Uptime collector."""

import time

import psutil

from .base import query


def get_uptime() -> int:
    """Return whole seconds since boot, never negative."""
    boot_time = query(psutil.boot_time, None, "boot time")
    if boot_time is None:
        return 0
    return max(int(time.time() - boot_time), 0)
