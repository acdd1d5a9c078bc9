"""
Frame Buffer
=============
Fixed-size character grid for one rendered instant, and the
Drawable contract entities use to paint themselves into it.
"""

from dataclasses import dataclass
from typing import List, Iterator, Tuple

from .config import NUM_COLS, NUM_ROWS, BLANK_CHAR, DEFAULT_COLOR


@dataclass
class Cell:
    """A single cell in a frame."""
    char: str = BLANK_CHAR
    fg_color: int = DEFAULT_COLOR

    def matches(self, other: 'Cell') -> bool:
        """Check if two cells are visually identical."""
        return self.char == other.char and self.fg_color == other.fg_color


class Frame:
    """
    One full snapshot of the playfield.

    Frames are built from blank every tick and handed to the
    render thread; nothing writes to a frame after it is sent.
    """

    def __init__(self, width: int = NUM_COLS, height: int = NUM_ROWS):
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [
            [Cell() for _ in range(width)]
            for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, char: str, fg_color: int = DEFAULT_COLOR):
        """Put a character at exact position. Out-of-bounds writes are dropped."""
        if self.in_bounds(x, y):
            cell = self.cells[y][x]
            cell.char = char
            cell.fg_color = fg_color

    def get(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def coords(self) -> Iterator[Tuple[int, int]]:
        """All cell coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (
            self.width == other.width and
            self.height == other.height and
            all(self.get(x, y).matches(other.get(x, y)) for x, y in self.coords())
        )

    def __repr__(self) -> str:
        return f'Frame({self.width}x{self.height})'


def new_frame(width: int = NUM_COLS, height: int = NUM_ROWS) -> Frame:
    """Create a blank frame of the playfield size."""
    return Frame(width, height)


class Drawable:
    """Something that can paint itself onto a frame."""

    def draw(self, frame: Frame) -> None:
        raise NotImplementedError
