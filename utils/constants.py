"""
Global constants for Neon Maze
"""

# Screen settings
CELL_SIZE = 40
MARGIN = 20
FPS = 60

# HUD panel height
PANEL_H = 60

# Maze
MAZE_SIZE = 15
MIN_MAZE_SIZE = 3

# Cell values
OPEN = 0
WALL = 1

# Room-space carving steps (dx, dy), two cells at a time
CARVE_DIRS = [
    (0, 2),
    (2, 0),
    (0, -2),
    (-2, 0),
]

# Single-cell direction vectors
DIR_UP = (0, -1)
DIR_RIGHT = (1, 0)
DIR_DOWN = (0, 1)
DIR_LEFT = (-1, 0)

DIRS = [DIR_UP, DIR_RIGHT, DIR_DOWN, DIR_LEFT]

# Entities
COLLECTIBLE_COUNT = 3
MOVING_WALL_COUNT = 3
MAX_PLACEMENT_TRIES = 10000

# Moving walls (rows per tick, rows either side of the anchor)
WALL_SPEED = 0.5
WALL_AMPLITUDE = 2

# Particles
PARTICLE_BURST_COUNT = 20
PARTICLE_DECAY = 0.02
PARTICLE_SPEED_MIN = 2.0
PARTICLE_SPEED_SPAN = 2.0
PARTICLE_RADIUS = 2

# Win celebration (12 ticks = 200ms at 60 FPS)
WIN_BURST_COUNT = 5
WIN_BURST_INTERVAL_TICKS = 12
