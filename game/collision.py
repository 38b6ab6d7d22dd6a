"""
Collision detection and handling
"""


class CollisionHandler:
    """
    Movement gate and pickup resolution
    """
    def __init__(self):
        self.last_collision = None

    def can_enter(self, grid, moving_wall_manager, x, y):
        """
        Check whether the player may step into (x, y) right now

        Args:
            grid: MazeGrid
            moving_wall_manager: MovingWallManager
            x, y: Target cell

        Returns:
            bool: False if out of bounds, a wall, or under a moving wall
        """
        if not grid.in_bounds(x, y):
            return False
        if not grid.is_open(x, y):
            return False
        return not moving_wall_manager.is_blocked(x, y)

    def check_player_position(self, player, collectible_manager):
        """
        Check player's current cell for fruits

        Returns:
            Dictionary with collision results:
            {
                'collected': list of Collectible removed from the cell
            }
        """
        result = {
            'collected': collectible_manager.collect_at(player.x, player.y)
        }

        self.last_collision = result
        return result
