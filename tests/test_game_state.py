import unittest

from game.game_state import GameState, GameStateManager
from game.settings import GameConfig
from utils.errors import ConfigurationError, InvalidTransitionError


class TestGameStateManager(unittest.TestCase):

    def setUp(self):
        self.manager = GameStateManager()

    def test_starts_playing(self):
        self.assertTrue(self.manager.is_state(GameState.PLAYING))
        self.assertFalse(self.manager.won)

    def test_win_then_restart(self):
        self.manager.win()
        self.assertTrue(self.manager.won)
        self.assertEqual(self.manager.previous_state, GameState.PLAYING)
        self.manager.restart()
        self.assertTrue(self.manager.is_state(GameState.PLAYING))

    def test_restart_while_playing_is_noop(self):
        self.manager.restart()
        self.assertEqual(self.manager.get_state_name(), "PLAYING")
        self.assertIsNone(self.manager.previous_state)

    def test_illegal_transitions_raise(self):
        with self.assertRaises(InvalidTransitionError):
            self.manager.transition_to(GameState.PLAYING)
        self.manager.win()
        with self.assertRaises(InvalidTransitionError):
            self.manager.win()


class TestGameConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = GameConfig().validate()
        self.assertEqual(cfg.size, 15)
        self.assertEqual(cfg.collectible_count, 3)
        self.assertEqual(cfg.moving_wall_count, 3)
        self.assertEqual(cfg.wall_speed, 0.5)
        self.assertIsNone(cfg.seed)

    def test_rejects_bad_sizes(self):
        for size in (0, 1, 2, 4, 16, 7.0, "15"):
            with self.assertRaises(ConfigurationError, msg=repr(size)):
                GameConfig(size=size).validate()

    def test_rejects_bad_counts_and_speeds(self):
        bad = [
            {'collectible_count': 0},
            {'moving_wall_count': -1},
            {'max_placement_tries': 0},
            {'wall_speed': 0},
            {'particle_decay': -0.1},
        ]
        for kwargs in bad:
            with self.assertRaises(ConfigurationError, msg=repr(kwargs)):
                GameConfig(**kwargs).validate()

    def test_accepts_small_odd_maze(self):
        self.assertEqual(GameConfig(size=3).validate().size, 3)


if __name__ == "__main__":
    unittest.main()
