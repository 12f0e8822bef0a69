"""Tests for the render step."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
import unittest

import pygame

from config import Config
from game import Game
from renderer import BLACK, WHITE, DrawingSurface, PygameSurface, Renderer, hsl_to_rgb


class RecordingSurface(DrawingSurface):
    """Remembers every drawing call in order."""

    def __init__(self):
        self.calls = []

    def clear(self, color=BLACK):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def fill_circle(self, x, y, radius, color, alpha=1.0, glow=0):
        self.calls.append(("circle", x, y, radius, color, alpha, glow))

    def dashed_line(self, start, end, color, dash):
        self.calls.append(("line", start, end, color, dash))

    def kinds(self):
        return [call[0] for call in self.calls]


class TestHslToRgb(unittest.TestCase):
    """Test color conversion."""

    def test_red_hue(self):
        self.assertEqual(hsl_to_rgb(0, 85, 60), (240, 66, 66))

    def test_hue_wraps(self):
        self.assertEqual(hsl_to_rgb(360, 85, 60), hsl_to_rgb(0, 85, 60))

    def test_white_and_black(self):
        self.assertEqual(hsl_to_rgb(200, 0, 100), (255, 255, 255))
        self.assertEqual(hsl_to_rgb(200, 50, 0), (0, 0, 0))


class TestRenderer(unittest.TestCase):
    """Test Renderer draw order and parameters."""

    def setUp(self):
        self.config = Config()
        self.game = Game(self.config, rng=random.Random(4))
        self.renderer = Renderer(self.config)
        self.surface = RecordingSurface()

    def test_empty_trail_frame(self):
        self.renderer.render(self.game.state, self.surface)
        self.assertEqual(self.surface.kinds(), ["clear", "line", "rect", "rect", "circle"])

    def test_net_is_dashed_center_line(self):
        self.renderer.render(self.game.state, self.surface)
        line = self.surface.calls[1]
        self.assertEqual(line, ("line", (400, 0), (400, 600), WHITE, 10))

    def test_paddles(self):
        state = self.game.state
        state.player_paddle_y = 10
        state.computer_paddle_y = 480
        self.renderer.render(state, self.surface)
        self.assertEqual(self.surface.calls[2], ("rect", 20, 10, 15, 100, WHITE))
        self.assertEqual(self.surface.calls[3], ("rect", 765, 480, 15, 100, WHITE))

    def test_ball_drawn_last_with_glow(self):
        state = self.game.state
        state.ball_color_hue = 0
        self.renderer.render(state, self.surface)
        self.assertEqual(
            self.surface.calls[-1],
            ("circle", state.ball_x, state.ball_y, 10, (240, 66, 66), 1.0, 25),
        )

    def test_trail_alpha_and_radius(self):
        trail = self.game.state.ball_trail
        for i in range(4):
            trail.push(100 + i, 200, 120)
        self.renderer.render(self.game.state, self.surface)

        circles = [c for c in self.surface.calls if c[0] == "circle"]
        self.assertEqual(len(circles), 5)
        trail_calls = circles[:4]
        self.assertEqual([c[1] for c in trail_calls], [100, 101, 102, 103])
        self.assertEqual([c[3] for c in trail_calls], [10, 10.5, 11, 11.5])
        for i, call in enumerate(trail_calls):
            self.assertAlmostEqual(call[5], (i + 1) / 8)
            self.assertEqual(call[6], 0)
        self.assertLess(trail_calls[-1][5], 0.5)

    def test_full_trail_after_steps(self):
        for _ in range(30):
            self.game.step()
        self.renderer.render(self.game.state, self.surface)
        self.assertEqual(self.surface.kinds().count("circle"), len(self.game.state.ball_trail) + 1)

    def test_render_does_not_mutate_state(self):
        for _ in range(10):
            self.game.step()
        before = self.game.get_observation()
        trail_before = list(self.game.state.ball_trail)
        self.renderer.render(self.game.state, self.surface)
        self.assertEqual(self.game.get_observation(), before)
        self.assertEqual(list(self.game.state.ball_trail), trail_before)


class TestPygameSurface(unittest.TestCase):
    """Test PygameSurface on an off-screen surface."""

    def setUp(self):
        self.surface = PygameSurface(pygame.Surface((100, 100)))

    def test_clear(self):
        self.surface.clear((10, 20, 30))
        self.assertEqual(tuple(self.surface.screen.get_at((50, 50)))[:3], (10, 20, 30))

    def test_fill_rect(self):
        self.surface.clear()
        self.surface.fill_rect(10, 10, 5, 5, WHITE)
        self.assertEqual(tuple(self.surface.screen.get_at((12, 12)))[:3], WHITE)
        self.assertEqual(tuple(self.surface.screen.get_at((20, 20)))[:3], BLACK)

    def test_opaque_circle_with_glow(self):
        self.surface.clear()
        self.surface.fill_circle(50, 50, 10, (200, 40, 40), glow=5)
        self.assertEqual(tuple(self.surface.screen.get_at((50, 50)))[:3], (200, 40, 40))

    def test_translucent_circle_blends(self):
        self.surface.clear()
        self.surface.fill_circle(50, 50, 10, WHITE, alpha=0.5)
        r, g, b = tuple(self.surface.screen.get_at((50, 50)))[:3]
        self.assertTrue(0 < r < 255)

    def test_dashed_line(self):
        self.surface.clear()
        self.surface.dashed_line((50, 0), (50, 100), WHITE, 10)
        self.assertEqual(tuple(self.surface.screen.get_at((50, 5)))[:3], WHITE)
        self.assertEqual(tuple(self.surface.screen.get_at((50, 15)))[:3], BLACK)
        self.assertEqual(tuple(self.surface.screen.get_at((50, 25)))[:3], WHITE)

    def test_full_frame(self):
        config = Config(surface_width=100, surface_height=100, paddle_height=20, paddle_margin=5)
        game = Game(config, rng=random.Random(0))
        Renderer(config).render(game.state, self.surface)
        # Player paddle is white at its left edge
        self.assertEqual(tuple(self.surface.screen.get_at((6, 45)))[:3], WHITE)


if __name__ == "__main__":
    unittest.main()
