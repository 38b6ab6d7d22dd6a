"""
Exceptions raised by the maze core
"""


class MazeGameError(Exception):
    """Base class for all Neon Maze errors"""


class ConfigurationError(MazeGameError):
    """Invalid maze size, entity count or speed"""


class PlacementError(MazeGameError):
    """Could not find a free open cell for an entity"""


class InvalidTransitionError(MazeGameError):
    """Illegal game state transition"""
