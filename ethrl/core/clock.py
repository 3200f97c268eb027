"""Frame timer tracking elapsed time and per-frame delta."""

from __future__ import annotations

import time as _time
from typing import Callable


class Time:
    """Measures time since start (``time``) and since the previous tick (``delta_time``)."""

    def __init__(self, clock: Callable[[], float] = _time.perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._frame = now
        self.delta_time = 0.0
        self.time = 0.0

    def tick(self) -> None:
        """Advance to the current moment, updating ``time`` and ``delta_time``."""
        now = self._clock()
        self.time = now - self._start
        self.delta_time = now - self._frame
        self._frame = now

    def reset(self) -> None:
        """Restart the elapsed-time measurement from now."""
        self._start = self._clock()