#!/usr/bin/env python3
"""
INVADERS Launcher
==================
Run this script to start the game.
"""

import sys

from invaders.main import main

if __name__ == "__main__":
    sys.exit(main())
