# config.py
"""
Configuration settings for the frame player.
"""
import logging

# ── Timeline ───────────────────────────────────────────────────────────────

# Timestamps and durations are plain numbers in ticks; 1 tick = 1 ms
TICKS_PER_SECOND = 1000
TIME_UNIT        = "ms"

# Fallback typing duration when a typing unit is missing a neighbour
DEFAULT_TYPING_DURATION = 10

# Random code printed inside verbose transitions (inclusive bounds)
DECORATION_RANGE = (100, 999)

# ── Playback output ────────────────────────────────────────────────────────

PLAY_MARKER = ">>> Play <<<"
END_MARKER  = ">>> End <<<"

# Column where LogTimer prints its "sleep N" lines
SLEEP_LOG_INDENT = 30

LOG_LEVEL = logging.INFO

# ── Display settings (PygameSink / --display) ──────────────────────────────

FULLSCREEN    = False
WINDOWED_SIZE = (800, 600)
FONT_SIZE     = 24
SCREEN_LINES  = 20          # scroll-back kept on screen
TEXT_COLOUR   = (0, 255, 0)
BG_COLOUR     = (0, 0, 0)
