"""
2D Renderer - draws a GameSnapshot with pygame
"""

import pygame
from utils.constants import CELL_SIZE, MARGIN, PANEL_H, PARTICLE_RADIUS, WALL
from utils.colors import (
    COLOR_BG, COLOR_WALL, COLOR_WALL_GRADIENT_END, COLOR_WALL_BORDER,
    COLOR_MOVING_WALL, COLOR_MOVING_WALL_GRADIENT_END, COLOR_PLAYER, COLOR_FRUIT
)
from utils.helpers import clamp, color_lerp, cell_origin, cell_center
from game.ui_manager import UIManager


def screen_size(maze_size):
    """Window size for a maze, including margins and the HUD panel"""
    side = maze_size * CELL_SIZE + 2 * MARGIN
    return side, side + PANEL_H


def make_gradient_tile(color_start, color_end, size=CELL_SIZE):
    """
    Pre-render a diagonal gradient cell with a light border

    Returns:
        pygame.Surface of size x size
    """
    tile = pygame.Surface((size, size))
    span = max(1, 2 * (size - 1))
    for i in range(2 * size - 1):
        color = color_lerp(color_start, color_end, i / span)
        pygame.draw.line(tile, color, (max(0, i - size + 1), min(i, size - 1)),
                         (min(i, size - 1), max(0, i - size + 1)))
    pygame.draw.rect(tile, COLOR_WALL_BORDER, (2, 2, size - 4, size - 4), 2)
    return tile


class Renderer:
    """
    Reads a snapshot each frame and draws it, never touches the simulation
    """
    def __init__(self, maze_size):
        self.screen_w, self.screen_h = screen_size(maze_size)
        self.maze_h = self.screen_h - PANEL_H
        self.ui_manager = UIManager()

        self.wall_tile = make_gradient_tile(COLOR_WALL, COLOR_WALL_GRADIENT_END)
        self.moving_wall_tile = make_gradient_tile(COLOR_MOVING_WALL, COLOR_MOVING_WALL_GRADIENT_END)

    def draw(self, screen, snapshot):
        """Draw one frame"""
        screen.fill(COLOR_BG)

        self._draw_maze(screen, snapshot)
        self._draw_moving_walls(screen, snapshot)
        for x, y in snapshot.collectibles:
            self._draw_glow_circle(screen, x, y, COLOR_FRUIT)
        self._draw_glow_circle(screen, snapshot.player[0], snapshot.player[1], COLOR_PLAYER)
        self._draw_particles(screen, snapshot)

        self.ui_manager.draw_hud(screen, snapshot, self.maze_h, self.screen_w, PANEL_H)
        if snapshot.won:
            self.ui_manager.draw_win_overlay(screen, self.screen_w, self.maze_h)

    def _draw_maze(self, screen, snapshot):
        for y, row in enumerate(snapshot.cells):
            for x, cell in enumerate(row):
                if cell == WALL:
                    screen.blit(self.wall_tile, cell_origin(x, y))

    def _draw_moving_walls(self, screen, snapshot):
        # Drawn at the fractional row so the sweep looks smooth
        for x, y, _, _ in snapshot.moving_walls:
            px, py = cell_origin(x, y)
            screen.blit(self.moving_wall_tile, (int(px), int(py)))

    def _draw_glow_circle(self, screen, x, y, color):
        """Filled circle with a soft halo"""
        cx, cy = cell_center(x, y)
        radius = CELL_SIZE // 3
        glow = pygame.Surface((radius * 4, radius * 4), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*color, 60), (radius * 2, radius * 2), radius * 2)
        screen.blit(glow, (int(cx) - radius * 2, int(cy) - radius * 2))
        pygame.draw.circle(screen, color, (int(cx), int(cy)), radius)

    def _draw_particles(self, screen, snapshot):
        size = PARTICLE_RADIUS * 2
        for x, y, life, color in snapshot.particles:
            alpha = int(clamp(life, 0.0, 1.0) * 255)
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(surf, (*color, alpha), (PARTICLE_RADIUS, PARTICLE_RADIUS), PARTICLE_RADIUS)
            screen.blit(surf, (int(x) - PARTICLE_RADIUS, int(y) - PARTICLE_RADIUS))
