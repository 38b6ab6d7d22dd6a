"""
Game metadata
"""

GAME_TITLE = "Neon Maze"
GAME_VERSION = "1.0.0"
