"""Millisecond interval timer."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when more than ``delay_ms`` milliseconds have passed."""

    def __init__(self, delay_ms: int = -1, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.delay_ms = delay_ms
        self._start = self._clock()

    def reset(self, delay_ms: int) -> None:
        """Set a new delay and restart counting."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def stop(self) -> None:
        """Disable the delay; every later check reports time over."""
        self.delay_ms = -1

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the last restart."""
        micros = round((self._clock() - self._start) * 1_000_000)
        return int(micros / 1000)

    def time_over(self) -> bool:
        """Return True and restart if the delay has been exceeded."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def describe(self) -> str:
        return f"Timer:  {self.elapsed_ms()}"