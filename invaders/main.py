#!/usr/bin/env python3
"""
INVADERS - Terminal Arcade Shooter
===================================
Shoot down the marching formation before it lands.

Controls:
    LEFT / A        - Move left
    RIGHT / D       - Move right
    SPACE / ENTER   - Fire
    Q / ESC         - Quit
"""

import argparse
import logging
import sys
from typing import List, Optional

from blessed import Terminal

from .audio import Audio
from .game import GameStatus, run
from .config import MIN_WIDTH, MIN_HEIGHT, SOUNDS_DIR

logger = logging.getLogger(__name__)

OUTCOME_TEXT = {
    GameStatus.WON: 'You win!',
    GameStatus.LOST: 'Game over.',
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='invaders',
        description='Terminal arcade shooter.',
    )
    parser.add_argument('--mute', action='store_true', help='Disable sound')
    parser.add_argument('--sounds-dir', default=SOUNDS_DIR,
                        help='Directory holding <cue>.wav files (default: %(default)s)')
    parser.add_argument('--log-file', help='Write a debug log to this file')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Log level for --log-file (default: %(default)s)')
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str], level: str):
    """Log to a file only; the terminal belongs to the renderer."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level),
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            force=True,
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Sets up terminal and audio, then plays one game."""
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        return 1

    logger.info('Starting in %dx%d terminal', term.width, term.height)

    try:
        with Audio(args.sounds_dir, enabled=not args.mute) as audio:
            with term.fullscreen(), term.cbreak(), term.hidden_cursor():
                status = run(term, audio)
                print(term.normal, end='', flush=True)

            # Terminal restored; let the final cue finish
            print(OUTCOME_TEXT[status])
            audio.wait()
    except KeyboardInterrupt:
        logger.info('Interrupted')
        return 130
    except Exception:
        logger.exception('Fatal error')
        raise

    return 0


if __name__ == '__main__':
    sys.exit(main())
