"""
Game configuration
"""

from utils.constants import (
    MAZE_SIZE, MIN_MAZE_SIZE, COLLECTIBLE_COUNT, MOVING_WALL_COUNT, WALL_SPEED,
    PARTICLE_DECAY, MAX_PLACEMENT_TRIES
)
from utils.errors import ConfigurationError


class GameConfig:
    """Configuration for a game session"""
    def __init__(self, **kwargs):
        # Maze
        self.size = kwargs.get('size', MAZE_SIZE)

        # Entities
        self.collectible_count = kwargs.get('collectible_count', COLLECTIBLE_COUNT)
        self.moving_wall_count = kwargs.get('moving_wall_count', MOVING_WALL_COUNT)
        self.max_placement_tries = kwargs.get('max_placement_tries', MAX_PLACEMENT_TRIES)

        # Motion
        self.wall_speed = kwargs.get('wall_speed', WALL_SPEED)
        self.particle_decay = kwargs.get('particle_decay', PARTICLE_DECAY)

        # Optional seed for reproducible sessions
        self.seed = kwargs.get('seed', None)

    def validate(self):
        """
        Fail fast on settings that can't produce a playable maze

        Raises:
            ConfigurationError
        """
        if not isinstance(self.size, int) or self.size < MIN_MAZE_SIZE:
            raise ConfigurationError(f"Maze size must be an integer >= {MIN_MAZE_SIZE}, got {self.size!r}")
        if self.size % 2 == 0:
            raise ConfigurationError(f"Maze size must be odd, got {self.size}")
        if self.collectible_count < 1:
            raise ConfigurationError("At least one collectible is required to win")
        if self.moving_wall_count < 0:
            raise ConfigurationError("Moving wall count can't be negative")
        if self.max_placement_tries < 1:
            raise ConfigurationError("Placement needs at least one try")
        if self.wall_speed <= 0:
            raise ConfigurationError(f"Wall speed must be positive, got {self.wall_speed}")
        if self.particle_decay <= 0:
            raise ConfigurationError(f"Particle decay must be positive, got {self.particle_decay}")
        return self

    def __repr__(self):
        return (f"GameConfig(size={self.size}, collectibles={self.collectible_count}, "
                f"moving_walls={self.moving_wall_count}, seed={self.seed})")
