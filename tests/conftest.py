"""
Pytest configuration and shared fixtures for the invaders tests.
"""

import re

import pytest
from blessed.keyboard import Keystroke

from invaders.channel import FrameChannel
from invaders.invaders import Invaders
from invaders.player import Player


class FakeTerminal:
    """
    Stands in for blessed.Terminal.

    Sequences are readable tokens so tests can count cursor moves:
    move_xy -> [x,y], normal -> <n>, color(n) -> <cN>.
    """

    home = '<h>'
    clear = '<clr>'
    normal = '<n>'

    def __init__(self, keys=()):
        self.keys = [Keystroke(k) if isinstance(k, str) else k for k in keys]

    def move_xy(self, x, y):
        return f'[{x},{y}]'

    def color(self, n):
        return f'<c{n}>'

    def inkey(self, timeout=None):
        if self.keys:
            return self.keys.pop(0)
        return Keystroke('')


class FakeAudio:
    """Records cues instead of playing them."""

    def __init__(self):
        self.played = []

    def play(self, cue):
        self.played.append(cue)

    def wait(self, timeout=None):
        pass


CELL_WRITE = re.compile(r'\[(\d+),(\d+)\]<n><c\d+>(.)', re.DOTALL)


def cell_writes(output):
    """(screen_x, screen_y, char) for every cell written in render output."""
    return [(int(x), int(y), ch) for x, y, ch in CELL_WRITE.findall(output)]


@pytest.fixture
def term():
    return FakeTerminal()


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def channel():
    return FrameChannel()


@pytest.fixture
def player():
    """Player in the middle of the bottom row."""
    return Player()


@pytest.fixture
def small_formation():
    """The 5x2 formation used for speed-up checks."""
    return Invaders(cols=range(0, 10, 2), rows=[2, 4])
