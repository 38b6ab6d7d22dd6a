"""
Moving Walls - obstacles sweeping up and down around an anchor row
"""

import math
from utils.constants import WALL_SPEED, WALL_AMPLITUDE


def oscillate(y, original_y, direction, speed=WALL_SPEED, amplitude=WALL_AMPLITUDE):
    """
    Advance one step of the vertical sweep

    Args:
        y: Current fractional row
        original_y: Anchor row
        direction: +1 (down) or -1 (up)
        speed: Rows per tick
        amplitude: Rows either side of the anchor

    Returns:
        (y, direction) after the step
    """
    y += speed * direction

    if y >= original_y + amplitude:
        y = original_y + amplitude
        direction = -1
    elif y <= original_y - amplitude:
        y = original_y - amplitude
        direction = 1

    return y, direction


class MovingWall:
    """
    A wall block oscillating vertically in its column
    """
    def __init__(self, x, y, direction=1):
        """
        Args:
            x, y: Starting grid position (y is the anchor row)
            direction: +1 or -1, initial sweep direction
        """
        self.x = x
        self.y = float(y)
        self.original_y = y
        self.direction = direction

    def update(self, speed=WALL_SPEED):
        """Advance one tick"""
        self.y, self.direction = oscillate(self.y, self.original_y, self.direction, speed)

    @property
    def row(self):
        """Grid row currently blocked"""
        return math.floor(self.y)

    def is_blocking(self, x, y):
        """Check if wall is blocking a position"""
        return self.x == x and self.row == y

    def state(self):
        return (self.x, self.y, self.original_y, self.direction)

    def __repr__(self):
        return f"MovingWall(x={self.x}, y={self.y:.2f}, anchor={self.original_y}, dir={self.direction:+d})"


class MovingWallManager:
    """
    Manages all moving walls in the maze
    """
    def __init__(self):
        self.walls = []

    def add_wall(self, x, y, direction=1):
        """
        Add a moving wall

        Returns:
            MovingWall object
        """
        wall = MovingWall(x, y, direction)
        self.walls.append(wall)
        return wall

    def update(self, speed=WALL_SPEED):
        """Update all moving walls"""
        for wall in self.walls:
            wall.update(speed)

    def is_blocked(self, x, y):
        """Check if position is blocked by any moving wall"""
        for wall in self.walls:
            if wall.is_blocking(x, y):
                return True
        return False

    def states(self):
        return tuple(wall.state() for wall in self.walls)

    def clear(self):
        """Remove all walls"""
        self.walls.clear()

    def __len__(self):
        return len(self.walls)

    def __repr__(self):
        return f"MovingWallManager(walls={len(self.walls)})"
