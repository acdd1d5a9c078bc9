"""
Player Module
==============
The ship on the bottom row, its shots, and hit detection.
"""

from typing import List

from .frame import Frame, Drawable
from .shot import Shot
from .config import NUM_COLS, PLAYER_ROW, MAX_SHOTS, PLAYER_CHAR, PLAYER_COLOR


class Player(Drawable):
    """
    Player ship.

    The row is fixed; only the column moves. Shots are kept in
    fire order and capped at max_shots alive at once.
    """

    def __init__(self, x: int = NUM_COLS // 2, y: int = PLAYER_ROW,
                 width: int = NUM_COLS, max_shots: int = MAX_SHOTS):
        self.x = x
        self.y = y
        self.width = width
        self.max_shots = max_shots
        self.shots: List[Shot] = []

    def move_left(self):
        if self.x > 0:
            self.x -= 1

    def move_right(self):
        if self.x < self.width - 1:
            self.x += 1

    def shoot(self) -> bool:
        """Fire a shot from just above the ship. Returns False at the cap."""
        if len(self.shots) >= self.max_shots:
            return False
        self.shots.append(Shot(self.x, self.y - 1))
        return True

    def update(self, delta: float):
        """Advance every shot, then retire the dead ones."""
        for shot in self.shots:
            shot.update(delta)
        self.shots = [shot for shot in self.shots if not shot.dead]

    def detect_hits(self, invaders) -> bool:
        """
        Resolve shots against the formation.

        Every row a flying shot crossed since its last update is checked,
        nearest first, so a long tick can't carry it past an invader.
        The first invader found is killed and the shot explodes on its
        cell in the same step. Exploding shots are ignored.
        """
        hit_something = False
        for shot in self.shots:
            if shot.exploding:
                continue
            for row in shot.swept:
                if invaders.kill_invader_at(shot.x, row):
                    shot.y = row
                    shot.explode()
                    hit_something = True
                    break
        return hit_something

    def draw(self, frame: Frame):
        frame.put(self.x, self.y, PLAYER_CHAR, PLAYER_COLOR)
        for shot in self.shots:
            shot.draw(frame)
