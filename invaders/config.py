"""
Game Configuration
===================
Playfield geometry, timings, glyphs and colours.
"""

# =============================================================================
# PLAYFIELD
# =============================================================================

NUM_COLS = 40
NUM_ROWS = 20

PLAYER_ROW = NUM_ROWS - 1
BOTTOM_ROW = NUM_ROWS - 1  # An invader on this row has landed

# Border + one status line below it
MIN_WIDTH = NUM_COLS + 2
MIN_HEIGHT = NUM_ROWS + 3


# =============================================================================
# TIMING (seconds)
# =============================================================================

MAX_SHOTS = 2
SHOT_STEP_TIME = 0.05
SHOT_EXPLODE_TIME = 0.25

INVADER_MOVE_TIME = 2.0
INVADER_MIN_MOVE_TIME = 0.25

TICK_SLEEP = 0.001
MAX_DELTA = 0.25  # Long stalls (suspend, debugger) don't teleport shots

# Log a warning when this many frames wait for the renderer
BACKLOG_WARNING = 120


# =============================================================================
# GLYPHS & COLOURS (ANSI 256)
# =============================================================================

PLAYER_CHAR = 'A'
SHOT_CHAR = '|'
EXPLOSION_CHAR = '*'
INVADER_CHARS = ('x', '+')
BORDER_CHAR = '#'
BLANK_CHAR = ' '

NEON_CYAN = 51
NEON_MAGENTA = 201
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196
GRAY_DARK = 238
DEFAULT_COLOR = 7

PLAYER_COLOR = NEON_CYAN
SHOT_COLOR = NEON_YELLOW
EXPLOSION_COLOR = NEON_RED
INVADER_COLOR = NEON_GREEN
BORDER_COLOR = GRAY_DARK


# =============================================================================
# AUDIO
# =============================================================================

SOUND_CUES = ('startup', 'pew', 'move', 'explode', 'win', 'lose')
SOUNDS_DIR = 'sounds'
