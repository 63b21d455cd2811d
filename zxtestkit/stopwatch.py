"""Wall-clock stopwatch used to limit emulation time on the host."""

from __future__ import annotations

import time
from datetime import timedelta


class InstantStopwatch:
    """Measures time elapsed since it was created, on a monotonic clock."""

    def __init__(self) -> None:
        self._timestamp = time.monotonic()

    def measure(self) -> timedelta:
        """Return the time elapsed since the stopwatch was started."""
        return timedelta(seconds=time.monotonic() - self._timestamp)