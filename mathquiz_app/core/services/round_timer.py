"""Wall-clock deadline tracking for the countdown and the playing clock."""

from __future__ import annotations

import math


class RoundTimer:
    """Counts down ``duration`` seconds from a start instant.

    Remaining time is always recomputed from the clock value passed in, so
    irregular or missed ticks never drift the display.
    """

    def __init__(self, duration: float) -> None:
        self._duration = float(duration)
        self._started_at: float | None = None

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def started_at(self) -> float | None:
        return self._started_at

    @property
    def deadline(self) -> float | None:
        if self._started_at is None:
            return None
        return self._started_at + self._duration

    def start(self, now: float) -> None:
        self._started_at = now

    def reset(self) -> None:
        self._started_at = None

    def is_running(self) -> bool:
        return self._started_at is not None

    def remaining(self, now: float) -> float:
        """Seconds left, clamped to ``[0, duration]``."""
        if self._started_at is None:
            return self._duration
        elapsed = now - self._started_at
        return max(0.0, min(self._duration, self._duration - elapsed))

    def remaining_whole_seconds(self, now: float) -> int:
        return math.ceil(self.remaining(now))

    def is_expired(self, now: float) -> bool:
        return self._started_at is not None and self.remaining(now) <= 0
