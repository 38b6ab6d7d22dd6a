"""
Maze generation - recursive backtracking on an odd-indexed grid
"""

import random
from utils.constants import CARVE_DIRS, MIN_MAZE_SIZE
from utils.errors import ConfigurationError
from maze.maze_core import MazeGrid


def _shuffled_dirs(rng):
    dirs = list(CARVE_DIRS)
    rng.shuffle(dirs)
    return dirs


# ========== GENERATOR: RECURSIVE BACKTRACKER ==========

def gen_recursive_backtracker(size, rng=None):
    """
    Recursive backtracker - animated generator

    Rooms sit at even (x, y); odd cells between them are connectors.
    Direction order is reshuffled every time a room is entered, which is
    the only source of variety. The call stack is kept explicitly so large
    grids don't hit the recursion limit; the carve order is the same as the
    recursive version.

    Even sizes are accepted: the last row and column then stay walls.

    Args:
        size: Grid side length (odd, >= 3)
        rng: random.Random-like source (shuffle is the only call used)

    Yields:
        {"grid", "cells", "current", "carved", "done"} step dicts
    """
    if size < MIN_MAZE_SIZE:
        raise ConfigurationError(f"Maze size must be >= {MIN_MAZE_SIZE}, got {size}")
    if rng is None:
        rng = random.Random()

    grid = MazeGrid(size)
    grid.open_cell(0, 0)

    # Each frame: [x, y, directions, next direction index]
    stack = [[0, 0, _shuffled_dirs(rng), 0]]

    yield {"grid": grid, "cells": grid.cells, "current": (0, 0), "carved": None, "done": False}

    while stack:
        frame = stack[-1]
        cx, cy, dirs, i = frame
        carved = False

        while i < len(dirs):
            dx, dy = dirs[i]
            i += 1
            nx, ny = cx + dx, cy + dy
            if grid.in_bounds(nx, ny) and grid.is_wall(nx, ny):
                grid.open_cell(cx + dx // 2, cy + dy // 2)
                grid.open_cell(nx, ny)
                frame[3] = i
                stack.append([nx, ny, _shuffled_dirs(rng), 0])
                carved = True
                yield {"grid": grid, "cells": grid.cells, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}
                break

        if not carved:
            stack.pop()
            yield {"grid": grid, "cells": grid.cells, "current": (cx, cy), "carved": None, "done": False}

    yield {"grid": grid, "cells": grid.cells, "current": (0, 0), "carved": None, "done": True}


def generate_maze(size, rng=None):
    """
    Generate a maze instantly

    Args:
        size: Grid side length
        rng: Optional seeded random source

    Returns:
        MazeGrid with the carved maze
    """
    last_state = None
    for state in gen_recursive_backtracker(size, rng):
        last_state = state
    return last_state["grid"]
