"""Time provider used for Max-Age and expiry calculations."""

from __future__ import annotations

import time
from collections.abc import Callable

# Zero-argument callable returning milliseconds since the Unix epoch.
TimeProvider = Callable[[], int]


def wall_clock_ms() -> int:
    """Return the current wall clock time in integer milliseconds."""
    return time.time_ns() // 1_000_000
