"""Tests for court geometry, computer tracking and the ball trail."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from config import Config
from court import Rectangle, ball_box, clamp, clamp_paddle_y, paddle_rect
from computer import track_ball
from trail import BallTrail, TrailSample


class TestRectangle(unittest.TestCase):
    """Test Rectangle class."""

    def test_overlap(self):
        a = Rectangle(0, 0, 10, 10)
        self.assertTrue(a.overlaps(Rectangle(5, 5, 10, 10)))
        self.assertTrue(Rectangle(5, 5, 10, 10).overlaps(a))

    def test_contained(self):
        self.assertTrue(Rectangle(0, 0, 100, 100).overlaps(Rectangle(40, 40, 5, 5)))

    def test_separate(self):
        self.assertFalse(Rectangle(0, 0, 10, 10).overlaps(Rectangle(20, 0, 10, 10)))
        self.assertFalse(Rectangle(0, 0, 10, 10).overlaps(Rectangle(0, 20, 10, 10)))

    def test_touching_edges_do_not_overlap(self):
        self.assertFalse(Rectangle(0, 0, 10, 10).overlaps(Rectangle(10, 0, 10, 10)))

    def test_center(self):
        rect = Rectangle(10, 20, 30, 40)
        self.assertEqual(rect.center, (25, 40))

    def test_ball_box(self):
        self.assertEqual(ball_box(50, 60, 10), Rectangle(40, 50, 20, 20))

    def test_paddle_rect(self):
        config = Config()
        self.assertEqual(paddle_rect(20, 250, config), Rectangle(20, 250, 15, 100))


class TestClamp(unittest.TestCase):
    """Test clamping helpers."""

    def test_clamp(self):
        self.assertEqual(clamp(5, 0, 10), 5)
        self.assertEqual(clamp(-5, 0, 10), 0)
        self.assertEqual(clamp(50, 0, 10), 10)

    def test_clamp_paddle_y(self):
        config = Config()
        self.assertEqual(clamp_paddle_y(-30, config), 0)
        self.assertEqual(clamp_paddle_y(520, config), 500)
        self.assertEqual(clamp_paddle_y(123.5, config), 123.5)


class TestTrackBall(unittest.TestCase):
    """Test the computer paddle heuristic."""

    def setUp(self):
        self.config = Config()

    def test_moves_down_toward_ball(self):
        self.assertEqual(track_ball(250, 320, self.config), 254)

    def test_moves_up_toward_ball(self):
        self.assertEqual(track_ball(250, 280, self.config), 246)

    def test_dead_zone_edges(self):
        """Exactly 15 away from the center is still inside the dead zone."""
        self.assertEqual(track_ball(250, 315, self.config), 250)
        self.assertEqual(track_ball(250, 285, self.config), 250)

    def test_clamped(self):
        self.assertEqual(track_ball(498, 600, self.config), 500)
        self.assertEqual(track_ball(2, 0, self.config), 0)


class TestBallTrail(unittest.TestCase):
    """Test BallTrail class."""

    def test_starts_empty(self):
        trail = BallTrail(15)
        self.assertEqual(len(trail), 0)
        self.assertEqual(list(trail), [])
        with self.assertRaises(IndexError):
            trail.newest

    def test_push_keeps_order(self):
        trail = BallTrail(3)
        trail.push(1, 1, 10)
        trail.push(2, 2, 20)
        self.assertEqual(list(trail), [TrailSample(1, 1, 10), TrailSample(2, 2, 20)])
        self.assertEqual(trail.newest, TrailSample(2, 2, 20))

    def test_oldest_evicted(self):
        trail = BallTrail(3)
        for i in range(5):
            trail.push(i, 0, 0)
        self.assertEqual(len(trail), 3)
        self.assertEqual([s.x for s in trail], [2, 3, 4])

    def test_clear(self):
        trail = BallTrail(3)
        trail.push(1, 1, 1)
        trail.clear()
        self.assertEqual(len(trail), 0)

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            BallTrail(0)


if __name__ == "__main__":
    unittest.main()
