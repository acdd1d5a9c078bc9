"""
Shots
======
Player projectiles: travel upward one row per step period, then
linger briefly as an explosion after a hit.
"""

from typing import List

from .frame import Frame
from .timer import Timer
from .config import (
    SHOT_STEP_TIME, SHOT_EXPLODE_TIME,
    SHOT_CHAR, SHOT_COLOR, EXPLOSION_CHAR, EXPLOSION_COLOR
)


class Shot:
    """A single projectile."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.exploding = False
        self.timer = Timer(SHOT_STEP_TIME)
        # Rows covered since the last update, nearest first
        self.swept: List[int] = [y]

    def update(self, delta: float):
        self.timer.update(delta)
        if self.exploding:
            return
        steps = self.timer.consume()
        if steps:
            self.swept = list(range(self.y - 1, self.y - steps - 1, -1))
            self.y -= steps
        else:
            self.swept = [self.y]

    def explode(self):
        """Freeze in place and start the explosion countdown."""
        self.exploding = True
        self.timer.reset(SHOT_EXPLODE_TIME)

    @property
    def dead(self) -> bool:
        """Past the top edge, or done exploding."""
        return (self.exploding and self.timer.ready) or self.y < 0

    def draw(self, frame: Frame):
        if self.exploding:
            frame.put(self.x, self.y, EXPLOSION_CHAR, EXPLOSION_COLOR)
        else:
            frame.put(self.x, self.y, SHOT_CHAR, SHOT_COLOR)

    def __repr__(self) -> str:
        state = 'exploding' if self.exploding else 'flying'
        return f'Shot({self.x}, {self.y}, {state})'
