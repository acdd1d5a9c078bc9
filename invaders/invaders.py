"""
Invader Formation
==================
A grid of invaders that marches in lock-step: sideways until an
edge, then down a row and back. The march speeds up as the
formation thins out.
"""

from typing import Dict, Iterable, Optional, Tuple

from .frame import Frame, Drawable
from .timer import Timer
from .config import (
    NUM_COLS, BOTTOM_ROW,
    INVADER_MOVE_TIME, INVADER_MIN_MOVE_TIME,
    INVADER_CHARS, INVADER_COLOR
)


class Invader:
    """A single invader. Moves only as part of the formation."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f'Invader({self.x}, {self.y})'


def default_grid(width: int = NUM_COLS) -> Tuple[range, range]:
    """Every other column away from the edges, every other row near the top."""
    return range(2, width - 2, 2), range(2, 9, 2)


class Invaders(Drawable):
    """
    The invader formation.

    All invaders share one direction and one move timer. The timer
    period is proportional to the live count, so fewer invaders
    march faster. Killed invaders are removed for good.
    """

    def __init__(self, cols: Optional[Iterable[int]] = None,
                 rows: Optional[Iterable[int]] = None,
                 width: int = NUM_COLS, bottom_row: int = BOTTOM_ROW,
                 move_time: float = INVADER_MOVE_TIME,
                 min_move_time: float = INVADER_MIN_MOVE_TIME):
        default_cols, default_rows = default_grid(width)
        cols = default_cols if cols is None else cols
        rows = default_rows if rows is None else rows

        self.width = width
        self.bottom_row = bottom_row
        self.base_move_time = move_time
        self.min_move_time = min_move_time

        # Keyed by starting grid slot; keys never get reused
        self.army: Dict[Tuple[int, int], Invader] = {
            (x, y): Invader(x, y)
            for y in rows
            for x in cols
        }
        self.initial_count = len(self.army)
        self.direction = 1
        self.move_timer = Timer(move_time)
        self._landed = False

    def __len__(self) -> int:
        return len(self.army)

    def __iter__(self):
        return iter(self.army.values())

    def move_period(self) -> float:
        """Current step period, shrinking linearly with the live count."""
        if self.initial_count == 0:
            return self.min_move_time
        share = len(self.army) / self.initial_count
        return self.min_move_time + (self.base_move_time - self.min_move_time) * share

    def update(self, delta: float) -> bool:
        """
        Advance the march timer. Returns True when the formation moved.

        At most one step happens per call, however much time passed.
        """
        if not self.army:
            return False

        self.move_timer.duration = self.move_period()
        self.move_timer.update(delta)
        if not self.move_timer.ready:
            return False
        self.move_timer.reset(self.move_period())

        min_x = min(invader.x for invader in self.army.values())
        max_x = max(invader.x for invader in self.army.values())
        next_min = min_x + self.direction
        next_max = max_x + self.direction

        if next_min < 0 or next_max > self.width - 1:
            self.direction = -self.direction
            for invader in self.army.values():
                invader.y += 1
        else:
            for invader in self.army.values():
                invader.x += self.direction

        self.reached_bottom()
        return True

    def kill_invader_at(self, x: int, y: int) -> bool:
        """Remove the invader on (x, y), if any."""
        for slot, invader in self.army.items():
            if invader.x == x and invader.y == y:
                del self.army[slot]
                return True
        return False

    def all_killed(self) -> bool:
        return not self.army

    def reached_bottom(self) -> bool:
        """True once any invader has landed; stays true for the session."""
        if not self._landed:
            self._landed = any(
                invader.y >= self.bottom_row for invader in self.army.values()
            )
        return self._landed

    def draw(self, frame: Frame):
        # Two-pose march animation keyed to the move timer
        char = INVADER_CHARS[0] if self.move_timer.progress < 0.5 else INVADER_CHARS[1]
        for invader in self.army.values():
            frame.put(invader.x, invader.y, char, INVADER_COLOR)
