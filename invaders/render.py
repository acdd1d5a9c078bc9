"""
Renderer
=========
Diff-based terminal output. Only cells that changed between two
frames are written, so a typical tick costs a handful of cursor
moves instead of a full repaint.

All terminal output happens on the render thread.
"""

import logging
import sys
import threading
from typing import List, Tuple

from .channel import FrameChannel, ChannelClosed
from .frame import Frame, Cell, new_frame
from .config import BORDER_CHAR, BORDER_COLOR, BACKLOG_WARNING

logger = logging.getLogger(__name__)

# Playfield sits inside a one-cell border
ORIGIN_X = 1
ORIGIN_Y = 1


def diff_frames(previous: Frame, current: Frame) -> List[Tuple[int, int, Cell]]:
    """Every (x, y, cell) of current that differs from previous, row-major."""
    changes = []
    for x, y in current.coords():
        cell = current.get(x, y)
        if not previous.in_bounds(x, y) or not cell.matches(previous.get(x, y)):
            changes.append((x, y, cell))
    return changes


def safe_position(frame: Frame) -> Tuple[int, int]:
    """Where the cursor rests between frames: just below the border."""
    return 0, frame.height + 2 * ORIGIN_Y


def _draw_border(term, width: int, height: int) -> str:
    """Static box around the playfield, drawn once."""
    parts = [term.normal, term.color(BORDER_COLOR)]
    w = width + 2 * ORIGIN_X
    h = height + 2 * ORIGIN_Y
    for i in range(w):
        parts.append(term.move_xy(i, 0) + BORDER_CHAR)
        parts.append(term.move_xy(i, h - 1) + BORDER_CHAR)
    for j in range(1, h - 1):
        parts.append(term.move_xy(0, j) + BORDER_CHAR)
        parts.append(term.move_xy(w - 1, j) + BORDER_CHAR)
    return ''.join(parts)


def _write_cell(term, x: int, y: int, cell: Cell) -> str:
    return (
        term.move_xy(x + ORIGIN_X, y + ORIGIN_Y) +
        term.normal +
        term.color(cell.fg_color) +
        (cell.char or ' ')
    )


def render(term, previous: Frame, current: Frame, force: bool = False) -> str:
    """
    Build the output that turns the screen from previous into current.

    With force, the screen is cleared, the border drawn and every cell
    written. Otherwise only changed cells are written. Either way the
    cursor ends at the safe position with attributes reset.
    """
    output_parts = []

    if force:
        output_parts.append(term.home + term.normal + term.clear)
        output_parts.append(_draw_border(term, current.width, current.height))
        for x, y in current.coords():
            output_parts.append(_write_cell(term, x, y, current.get(x, y)))
    else:
        for x, y, cell in diff_frames(previous, current):
            output_parts.append(_write_cell(term, x, y, cell))

    safe_x, safe_y = safe_position(current)
    output_parts.append(term.normal + term.move_xy(safe_x, safe_y))
    return ''.join(output_parts)


class RenderThread(threading.Thread):
    """
    Owns the terminal while the game runs.

    Paints a blank forced frame, then renders each received frame
    against the last one until the channel is closed and drained.
    A failure is kept on .error for the simulation thread to raise
    after join().
    """

    def __init__(self, term, channel: FrameChannel, stream=None):
        super().__init__(name='render', daemon=True)
        self.term = term
        self.channel = channel
        self.stream = stream if stream is not None else sys.stdout
        self.error = None
        self.frames_drawn = 0

    def _write(self, output: str):
        self.stream.write(output)
        self.stream.flush()

    def run(self):
        try:
            last_frame = new_frame()
            self._write(render(self.term, last_frame, last_frame, force=True))
            behind = False

            while True:
                try:
                    current_frame = self.channel.recv()
                except ChannelClosed:
                    break

                backlog = self.channel.backlog
                if backlog > BACKLOG_WARNING and not behind:
                    logger.warning('Renderer is %d frames behind', backlog)
                behind = backlog > BACKLOG_WARNING

                self._write(render(self.term, last_frame, current_frame))
                last_frame = current_frame
                self.frames_drawn += 1
        except Exception as exc:
            logger.exception('Render thread failed')
            self.error = exc
            self.channel.disconnect()
