"""Simple stopwatch measuring whole milliseconds."""

from __future__ import annotations

import time


class Timer:
    """Stopwatch started on creation."""

    def __init__(self):
        self._start = 0
        self.reset()

    def reset(self):
        """Restart the stopwatch."""
        self._start = time.monotonic_ns()

    def elapsed_ms(self):
        """Return whole milliseconds since the last reset, as a float."""
        return float((time.monotonic_ns() - self._start) // 1_000_000)