"""
UI Manager - HUD and win overlay
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG, COLOR_OVERLAY
)
from utils.helpers import format_score


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 32, bold=True)

    def draw_hud(self, screen, snapshot, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            snapshot: GameSnapshot
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        score = self.font_medium.render(format_score(snapshot.score, snapshot.total), True, COLOR_TEXT)
        screen.blit(score, (10, panel_y + 8))

        help_text = self.font_small.render("Arrows/WASD: Move | R: Restart | ESC: Quit", True, COLOR_TEXT_DIM)
        screen.blit(help_text, (10, panel_y + 34))

    def draw_win_overlay(self, screen, screen_w, screen_h):
        """Dim the maze and show the win message"""
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))

        win_text = self.font_large.render("YOU WIN!", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(win_text, (screen_w // 2 - win_text.get_width() // 2,
                               screen_h // 2 - win_text.get_height()))

        hint = self.font_medium.render("Press R to play again", True, COLOR_TEXT)
        screen.blit(hint, (screen_w // 2 - hint.get_width() // 2, screen_h // 2 + 10))
