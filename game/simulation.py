"""
Game Simulation - owns the maze session and advances it tick by tick

The renderer only ever sees snapshot(), and input arrives as intents,
so everything here runs synchronously on the caller's thread.
"""

import random
from collections import namedtuple
from enum import Enum, auto

from maze.generator import generate_maze
from maze.maze_core import is_perfect
from entities.player import Player
from entities.collectible import CollectibleManager
from entities.moving_wall import MovingWallManager
from entities.particle import ParticleSystem, ParticleEffects
from game.collision import CollisionHandler
from game.game_state import GameStateManager
from game.placement import place_entities, spawn_moving_walls
from game.scheduler import Scheduler
from game.settings import GameConfig
from utils.constants import (
    DIR_UP, DIR_RIGHT, DIR_DOWN, DIR_LEFT, WIN_BURST_COUNT, WIN_BURST_INTERVAL_TICKS
)


class Direction(Enum):
    """Movement directions as (dx, dy)"""
    UP = DIR_UP
    RIGHT = DIR_RIGHT
    DOWN = DIR_DOWN
    LEFT = DIR_LEFT


class Intent(Enum):
    """Discrete commands from the input layer"""
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()
    RESTART = auto()
    STOP = auto()


INTENT_DIRECTIONS = {
    Intent.UP: Direction.UP,
    Intent.RIGHT: Direction.RIGHT,
    Intent.DOWN: Direction.DOWN,
    Intent.LEFT: Direction.LEFT,
}


class MoveOutcome(Enum):
    """Result of a move request"""
    BLOCKED = auto()
    MOVED = auto()
    MOVED_AND_COLLECTED = auto()
    MOVED_AND_WON = auto()


GameSnapshot = namedtuple("GameSnapshot", [
    "size",
    "cells",          # tuple of rows, cells[y][x]
    "player",         # (x, y)
    "collectibles",   # tuple of (x, y)
    "moving_walls",   # tuple of (x, y, original_y, direction), y fractional
    "particles",      # tuple of (x, y, life, color)
    "score",
    "total",
    "won",
    "running",
    "tick",
])


class GameSimulation:
    """
    Single maze session: grid, player, fruits, moving walls and particles
    """
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: GameConfig, validated here
            rng: random source shared by maze, placement and effects
        """
        self.config = (config or GameConfig()).validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler()
        self.scheduler = Scheduler()
        self.particle_system = ParticleSystem(self.rng)
        self.particle_effects = ParticleEffects(self.particle_system)

        self.grid = None
        self.player = None
        self.collectible_manager = None
        self.moving_wall_manager = None

        self.score = 0
        self.ticks = 0
        self.running = False

        self._install_session(*self._build_session())
        self.running = True

    # ========== SESSION ==========

    def _build_session(self):
        """Generate a fresh maze and its entities without touching live state"""
        cfg = self.config
        grid = generate_maze(cfg.size, self.rng)
        assert is_perfect(grid), "carved maze is not a spanning tree"
        player = Player(0, 0)

        collectibles = CollectibleManager()
        for x, y in place_entities(grid, player.pos, cfg.collectible_count, self.rng,
                                   cfg.max_placement_tries):
            collectibles.add_collectible(x, y)

        walls = MovingWallManager()
        for x, y, direction in spawn_moving_walls(grid, player.pos, cfg.moving_wall_count,
                                                  self.rng, cfg.max_placement_tries):
            walls.add_wall(x, y, direction)

        return grid, player, collectibles, walls

    def _install_session(self, grid, player, collectibles, walls):
        self.grid = grid
        self.player = player
        self.collectible_manager = collectibles
        self.moving_wall_manager = walls

    def restart(self):
        """
        Start over with a brand new maze

        The new session is fully built before anything live is replaced,
        so a tick can never see a half-reset game.
        """
        session = self._build_session()

        self._install_session(*session)
        self.score = 0
        self.ticks = 0
        self.particle_system.clear()
        self.scheduler.clear()
        self.state_manager.restart()
        self.running = True

    def stop(self):
        """Stop the tick loop; safe to call repeatedly"""
        self.running = False

    # ========== INPUT ==========

    def handle_intent(self, intent):
        """
        Dispatch an input intent

        Returns:
            MoveOutcome for directional intents, None otherwise
        """
        if intent in INTENT_DIRECTIONS:
            return self.try_move(INTENT_DIRECTIONS[intent])
        if intent == Intent.RESTART:
            self.restart()
        elif intent == Intent.STOP:
            self.stop()
        return None

    def try_move(self, direction):
        """
        Try to step the player one cell

        Args:
            direction: Direction enum value

        Returns:
            MoveOutcome
        """
        if self.won:
            return MoveOutcome.BLOCKED

        dx, dy = direction.value
        nx, ny = self.player.target(dx, dy)

        if not self.collision_handler.can_enter(self.grid, self.moving_wall_manager, nx, ny):
            return MoveOutcome.BLOCKED

        self.player.move_to(nx, ny)

        result = self.collision_handler.check_player_position(self.player, self.collectible_manager)
        if not result['collected']:
            return MoveOutcome.MOVED

        self.score += len(result['collected'])
        self.particle_effects.collection_burst(self.player.pos)

        if self.score >= self.collectible_manager.total:
            self._win()
            return MoveOutcome.MOVED_AND_WON

        return MoveOutcome.MOVED_AND_COLLECTED

    def _win(self):
        self.state_manager.win()
        self.stop()

        size = self.grid.size
        for i in range(WIN_BURST_COUNT):
            cell = (self.rng.randrange(size), self.rng.randrange(size))
            self.scheduler.schedule(
                i * WIN_BURST_INTERVAL_TICKS,
                lambda cell=cell: self.particle_effects.celebration_burst(cell)
            )
        self.scheduler.run_due()

    # ========== UPDATE ==========

    def tick(self):
        """
        One fixed-rate simulation step

        Does nothing once stopped or won, since a scheduled call may still
        arrive after the loop was halted.
        """
        if not self.running or self.won:
            return

        self.ticks += 1
        self.scheduler.advance()
        self.particle_system.tick(self.config.particle_decay)
        self.moving_wall_manager.update(self.config.wall_speed)

    def update_effects(self):
        """
        Advance only the scheduler and particles

        Keeps the win celebration animating after the tick loop has
        stopped; maze, player, walls and score are left untouched.
        """
        self.scheduler.advance()
        self.particle_system.tick(self.config.particle_decay)

    # ========== STATE ==========

    @property
    def won(self):
        return self.state_manager.won

    @property
    def total(self):
        return self.collectible_manager.total

    def snapshot(self):
        """Immutable view of the current state for the renderer"""
        return GameSnapshot(
            size=self.grid.size,
            cells=self.grid.rows_snapshot(),
            player=self.player.pos,
            collectibles=self.collectible_manager.positions(),
            moving_walls=self.moving_wall_manager.states(),
            particles=self.particle_system.states(),
            score=self.score,
            total=self.total,
            won=self.won,
            running=self.running,
            tick=self.ticks,
        )

    def __repr__(self):
        return (f"GameSimulation(size={self.grid.size}, score={self.score}/{self.total}, "
                f"state={self.state_manager.get_state_name()})")
