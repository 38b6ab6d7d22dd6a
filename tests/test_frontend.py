import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from game.input_handler import InputHandler, event_to_intent
from game.renderer import Renderer, screen_size
from game.settings import GameConfig
from game.simulation import GameSimulation, Intent, MoveOutcome
from utils.colors import COLOR_PLAYER
from utils.constants import CELL_SIZE, MARGIN, PANEL_H


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestInputMapping(unittest.TestCase):

    def test_arrows_and_wasd(self):
        pairs = [
            (pygame.K_UP, Intent.UP), (pygame.K_w, Intent.UP),
            (pygame.K_RIGHT, Intent.RIGHT), (pygame.K_d, Intent.RIGHT),
            (pygame.K_DOWN, Intent.DOWN), (pygame.K_s, Intent.DOWN),
            (pygame.K_LEFT, Intent.LEFT), (pygame.K_a, Intent.LEFT),
        ]
        for key, intent in pairs:
            self.assertEqual(event_to_intent(key_event(key)), intent)

    def test_restart_stop_and_unbound(self):
        self.assertEqual(event_to_intent(key_event(pygame.K_r)), Intent.RESTART)
        self.assertEqual(event_to_intent(key_event(pygame.K_ESCAPE)), Intent.STOP)
        self.assertEqual(event_to_intent(pygame.event.Event(pygame.QUIT)), Intent.STOP)
        self.assertIsNone(event_to_intent(key_event(pygame.K_q)))
        self.assertIsNone(event_to_intent(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)))


class TestInputHandler(unittest.TestCase):

    def setUp(self):
        self.sim = GameSimulation(GameConfig(seed=5))
        self.handler = InputHandler(self.sim)

    def test_escape_stops_without_quitting(self):
        self.handler.handle_event(key_event(pygame.K_ESCAPE))
        self.assertFalse(self.sim.running)
        self.assertFalse(self.handler.quit_requested)

        self.handler.handle_event(key_event(pygame.K_r))
        self.assertTrue(self.sim.running)

    def test_window_close_quits(self):
        self.handler.handle_event(pygame.event.Event(pygame.QUIT))
        self.assertTrue(self.handler.quit_requested)
        self.assertFalse(self.sim.running)

    def test_process_events_returns_move_outcomes(self):
        results = self.handler.process_events([
            key_event(pygame.K_LEFT),
            key_event(pygame.K_q),
        ])
        self.assertEqual(results, [(Intent.LEFT, MoveOutcome.BLOCKED)])


class TestRenderer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def setUp(self):
        self.sim = GameSimulation(GameConfig(seed=21))
        self.renderer = Renderer(self.sim.config.size)
        self.screen = pygame.Surface((self.renderer.screen_w, self.renderer.screen_h))

    def test_screen_size(self):
        self.assertEqual(screen_size(15), (15 * CELL_SIZE + 2 * MARGIN, 15 * CELL_SIZE + 2 * MARGIN + PANEL_H))

    def test_player_drawn_at_start_cell(self):
        self.renderer.draw(self.screen, self.sim.snapshot())
        center = MARGIN + CELL_SIZE // 2
        self.assertEqual(tuple(self.screen.get_at((center, center)))[:3], COLOR_PLAYER)

    def test_draws_particles_and_win_overlay(self):
        self.sim.particle_effects.celebration_burst((3, 3))
        self.sim.stop()
        snap = self.sim.snapshot()._replace(won=True)
        self.renderer.draw(self.screen, snap)


if __name__ == "__main__":
    unittest.main()
