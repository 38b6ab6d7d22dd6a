"""
Helper utility functions for Neon Maze
"""

from utils.constants import CELL_SIZE, MARGIN


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def color_lerp(color1, color2, t):
    """Interpolate between two RGB colors"""
    r = int(lerp(color1[0], color2[0], t))
    g = int(lerp(color1[1], color2[1], t))
    b = int(lerp(color1[2], color2[2], t))
    return (r, g, b)


def cell_origin(x, y):
    """Top-left pixel of a grid cell"""
    return x * CELL_SIZE + MARGIN, y * CELL_SIZE + MARGIN


def cell_center(x, y):
    """Pixel center of a grid cell (y may be fractional)"""
    return (x + 0.5) * CELL_SIZE + MARGIN, (y + 0.5) * CELL_SIZE + MARGIN


def format_score(score, total):
    """Format score as 'Score: s/t'"""
    return f"Score: {score}/{total}"
