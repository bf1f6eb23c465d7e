"""FrameClock - wall-clock deltas between rendered frames."""
from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._last = time_fn()
        self._frame_number = 0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def tick(self) -> float:
        """Close the current frame and return seconds since the previous one.

        Never negative, even if the time source steps backwards.
        """
        now = self._time_fn()
        elapsed = max(0.0, now - self._last)
        self._last = max(self._last, now)
        self._frame_number += 1
        return elapsed

    def reset(self) -> None:
        self._last = self._time_fn()
        self._frame_number = 0
