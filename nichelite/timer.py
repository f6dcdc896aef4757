"""A start/stop/pause timer measured in milliseconds."""

from __future__ import annotations

import time
from collections.abc import Callable


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Measures elapsed milliseconds on a clock, with pause support."""

    def __init__(self, clock: Callable[[], int] = _monotonic_ms) -> None:
        self._clock = clock
        self._start_ticks = 0
        self._paused_ticks = 0
        self._started = False
        self._paused = False

    def start(self) -> None:
        """Start (or restart) timing from now."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Stop the timer and reset its count."""
        self._started = False
        self._paused = True
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the count if the timer is running."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        """Resume counting if the timer is paused."""
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._paused_ticks
            self._paused_ticks = 0

    def ticks(self) -> int:
        """Return elapsed milliseconds, or 0 if the timer is not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self._clock() - self._start_ticks

    def is_started(self) -> bool:
        return self._started

    def is_paused(self) -> bool:
        return self._paused and self._started