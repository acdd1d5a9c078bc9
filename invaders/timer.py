"""
Timers
=======
Elapsed-time countdowns. All motion is driven by measured seconds,
never by frame counts.
"""

from typing import Optional


class Timer:
    """Accumulates elapsed time against a fixed duration."""

    def __init__(self, duration: float):
        self.duration = duration
        self.elapsed = 0.0

    def update(self, delta: float):
        self.elapsed += delta

    @property
    def ready(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def progress(self) -> float:
        """Fraction of the duration elapsed, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    def reset(self, duration: Optional[float] = None):
        """Restart the countdown, optionally with a new duration."""
        if duration is not None:
            self.duration = duration
        self.elapsed = 0.0

    def consume(self) -> int:
        """
        Take every whole period out of the elapsed time.

        Returns how many periods fired; the remainder carries over.
        """
        if self.duration <= 0 or self.elapsed < self.duration:
            return 0
        periods = int(self.elapsed // self.duration)
        self.elapsed -= periods * self.duration
        return periods
