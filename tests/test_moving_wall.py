import unittest

from entities.moving_wall import MovingWall, MovingWallManager, oscillate


class TestOscillate(unittest.TestCase):

    def test_step_in_direction(self):
        self.assertEqual(oscillate(0.0, 0, 1, 0.5), (0.5, 1))
        self.assertEqual(oscillate(0.0, 0, -1, 0.5), (-0.5, -1))

    def test_clamps_and_flips_at_top(self):
        self.assertEqual(oscillate(1.5, 0, 1, 0.5), (2, -1))
        self.assertEqual(oscillate(1.8, 0, 1, 0.5), (2, -1))

    def test_clamps_and_flips_at_bottom(self):
        self.assertEqual(oscillate(4.5, 6, -1, 0.5), (4, 1))
        self.assertEqual(oscillate(4.2, 6, -1, 0.5), (4, 1))

    def test_does_not_mutate_inputs(self):
        """Pure function: same arguments, same result."""
        first = oscillate(1.0, 3, 1, 0.5)
        second = oscillate(1.0, 3, 1, 0.5)
        self.assertEqual(first, second)


class TestMovingWall(unittest.TestCase):

    def setUp(self):
        self.wall = MovingWall(3, 5, direction=1)

    def test_initial_state(self):
        self.assertEqual(self.wall.original_y, 5)
        self.assertEqual(self.wall.y, 5.0)
        self.assertEqual(self.wall.state(), (3, 5.0, 5, 1))

    def test_sweep_stays_in_bounds_and_flips_only_at_edges(self):
        """y stays in [anchor-2, anchor+2]; direction changes only at a bound."""
        for speed in (0.5, 0.3, 0.7):
            wall = MovingWall(3, 5, direction=-1)
            for _ in range(200):
                before = wall.direction
                wall.update(speed)
                self.assertGreaterEqual(wall.y, 3)
                self.assertLessEqual(wall.y, 7)
                if wall.direction != before:
                    self.assertIn(wall.y, (3, 7))

    def test_full_sweep_sequence(self):
        ys = []
        for _ in range(8):
            self.wall.update(0.5)
            ys.append(self.wall.y)
        self.assertEqual(ys, [5.5, 6.0, 6.5, 7, 6.5, 6.0, 5.5, 5.0])
        self.assertEqual(self.wall.direction, -1)

    def test_blocking_uses_floor_of_row(self):
        self.wall.y = 5.5
        self.assertTrue(self.wall.is_blocking(3, 5))
        self.assertFalse(self.wall.is_blocking(3, 6))
        self.assertFalse(self.wall.is_blocking(2, 5))

        self.wall.y = 4.5
        self.assertTrue(self.wall.is_blocking(3, 4))
        self.assertFalse(self.wall.is_blocking(3, 5))

    def test_negative_rows_floor_down(self):
        wall = MovingWall(0, 0, direction=-1)
        wall.update(0.5)
        self.assertEqual(wall.row, -1)
        self.assertFalse(wall.is_blocking(0, 0))


class TestMovingWallManager(unittest.TestCase):

    def setUp(self):
        self.manager = MovingWallManager()
        self.manager.add_wall(1, 0, 1)
        self.manager.add_wall(4, 4, -1)

    def test_is_blocked(self):
        self.assertTrue(self.manager.is_blocked(1, 0))
        self.assertTrue(self.manager.is_blocked(4, 4))
        self.assertFalse(self.manager.is_blocked(0, 0))

    def test_update_moves_every_wall(self):
        self.manager.update(0.5)
        self.assertEqual(self.manager.states(), ((1, 0.5, 0, 1), (4, 3.5, 4, -1)))
        self.manager.update(0.5)
        self.assertFalse(self.manager.is_blocked(1, 0))
        self.assertTrue(self.manager.is_blocked(1, 1))
        self.assertTrue(self.manager.is_blocked(4, 3))

    def test_clear(self):
        self.manager.clear()
        self.assertEqual(len(self.manager), 0)
        self.assertFalse(self.manager.is_blocked(1, 0))


if __name__ == "__main__":
    unittest.main()
