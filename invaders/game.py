"""
Game Loop
==========
Per-tick simulation on the main thread, with finished frames handed
to the render thread over a FrameChannel.
"""

import logging
import time
from enum import Enum
from typing import Iterable, Optional

from .channel import FrameChannel
from .controls import Action, drain_input
from .frame import new_frame
from .invaders import Invaders
from .player import Player
from .render import RenderThread
from .config import MAX_DELTA, TICK_SLEEP

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    RUNNING = 'running'
    WON = 'won'
    LOST = 'lost'


class Game:
    """
    Central game state. One tick per loop iteration:

        input -> quit? -> update -> hits -> draw & send -> win? -> lose?
    """

    def __init__(self, audio, channel: FrameChannel,
                 player: Optional[Player] = None,
                 invaders: Optional[Invaders] = None):
        self.audio = audio
        self.channel = channel
        self.player = player if player is not None else Player()
        self.invaders = invaders if invaders is not None else Invaders()
        self.status = GameStatus.RUNNING
        self.ticks = 0
        self._renderer_gone = False

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def handle_actions(self, actions: Iterable[Action]) -> bool:
        """Apply queued actions in order. Returns False on quit."""
        for action in actions:
            if action is Action.QUIT:
                return False
            if action is Action.MOVE_LEFT:
                self.player.move_left()
            elif action is Action.MOVE_RIGHT:
                self.player.move_right()
            elif action is Action.FIRE:
                if self.player.shoot():
                    self.audio.play('pew')
        return True

    def tick(self, delta: float, actions: Iterable[Action] = ()) -> GameStatus:
        """Run one tick with delta seconds of elapsed time."""
        if not self.running:
            return self.status

        if not self.handle_actions(actions):
            self.audio.play('lose')
            self.status = GameStatus.LOST
            logger.info('Player quit after %d ticks', self.ticks)
            return self.status

        # Updates
        self.player.update(delta)
        if self.invaders.update(delta):
            self.audio.play('move')
        if self.player.detect_hits(self.invaders):
            self.audio.play('explode')

        # Draw & hand off
        frame = new_frame()
        for drawable in (self.player, self.invaders):
            drawable.draw(frame)
        self._send(frame)
        self.ticks += 1

        # Win or lose
        if self.invaders.all_killed():
            self.audio.play('win')
            self.status = GameStatus.WON
        elif self.invaders.reached_bottom():
            self.audio.play('lose')
            self.status = GameStatus.LOST

        if not self.running:
            logger.info('Game over: %s after %d ticks', self.status.value, self.ticks)
        return self.status

    def _send(self, frame):
        if self.channel.send(frame):
            return
        if not self._renderer_gone:
            logger.warning('Renderer unavailable, continuing without display')
            self._renderer_gone = True


def run(term, audio, stream=None) -> GameStatus:
    """
    Play one session on an already-prepared terminal.

    The render thread is always closed and joined before returning,
    so the last frame is on screen before the terminal is restored.
    """
    channel = FrameChannel()
    renderer = RenderThread(term, channel, stream)
    game = Game(audio, channel)

    audio.play('startup')
    renderer.start()
    try:
        last_time = time.perf_counter()
        while game.running:
            now = time.perf_counter()
            delta = min(now - last_time, MAX_DELTA)
            last_time = now

            game.tick(delta, drain_input(term))
            time.sleep(TICK_SLEEP)
    finally:
        channel.close()
        renderer.join()

    if renderer.error is not None:
        raise renderer.error
    return game.status
