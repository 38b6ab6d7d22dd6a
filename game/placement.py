"""
Entity placement - scatter fruits and moving walls onto open cells
"""

from utils.constants import MAX_PLACEMENT_TRIES
from utils.errors import PlacementError


def random_free_cell(grid, player_pos, rng, max_tries=MAX_PLACEMENT_TRIES):
    """
    Sample uniform cells until one is open and not the player's

    Args:
        grid: MazeGrid
        player_pos: (x, y) to avoid
        rng: random source
        max_tries: Samples before giving up

    Returns:
        (x, y) tuple

    Raises:
        PlacementError if no free cell was hit within max_tries
    """
    for _ in range(max_tries):
        x = rng.randrange(grid.size)
        y = rng.randrange(grid.size)
        if grid.is_open(x, y) and (x, y) != tuple(player_pos):
            return x, y
    raise PlacementError(f"No free open cell found after {max_tries} tries")


def place_entities(grid, player_pos, count, rng, max_tries=MAX_PLACEMENT_TRIES):
    """
    Pick positions for count entities

    Positions are not checked against each other, so two entities may
    share a cell.

    Returns:
        List of (x, y) tuples
    """
    return [random_free_cell(grid, player_pos, rng, max_tries) for _ in range(count)]


def spawn_moving_walls(grid, player_pos, count, rng, max_tries=MAX_PLACEMENT_TRIES):
    """
    Generate spawn positions for moving walls

    Returns:
        List of (x, y, direction) tuples, y doubles as the anchor row
    """
    spawns = []
    for _ in range(count):
        x, y = random_free_cell(grid, player_pos, rng, max_tries)
        direction = 1 if rng.random() < 0.5 else -1
        spawns.append((x, y, direction))
    return spawns
