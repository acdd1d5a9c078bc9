"""
Controls
=========
Turns blessed keystrokes into game actions.
"""

from enum import Enum, auto
from typing import List, Optional


class Action(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    QUIT = auto()


_KEY_NAMES = {
    'KEY_LEFT': Action.MOVE_LEFT,
    'KEY_RIGHT': Action.MOVE_RIGHT,
    'KEY_ENTER': Action.FIRE,
    'KEY_ESCAPE': Action.QUIT,
}

_KEY_CHARS = {
    'a': Action.MOVE_LEFT,
    'd': Action.MOVE_RIGHT,
    ' ': Action.FIRE,
    '\n': Action.FIRE,
    '\r': Action.FIRE,
    'q': Action.QUIT,
}


def decode_key(key) -> Optional[Action]:
    """Map a single keystroke from inkey() to an action, or None to ignore it."""
    if key is None or not key:
        return None

    if key.is_sequence:
        return _KEY_NAMES.get(key.name)

    return _KEY_CHARS.get(key.lower())


def drain_input(term) -> List[Action]:
    """
    Read every keystroke already waiting, without blocking.

    Input never backs up across ticks. Read errors propagate.
    """
    actions = []
    key = term.inkey(timeout=0)
    while key:
        action = decode_key(key)
        if action is not None:
            actions.append(action)
        key = term.inkey(timeout=0)
    return actions
