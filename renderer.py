"""Drawing for Neon Pong."""

import colorsys
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import pygame

from config import Config
from game import GameState
from scoreboard import Scoreboard

Color = Tuple[int, int, int]

# Colors
WHITE, BLACK = (255, 255, 255), (0, 0, 0)
GRAY = (128, 128, 128)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """
    Convert a CSS-style HSL color to an RGB tuple.

    Args:
        hue: Degrees, any value (taken mod 360)
        saturation: Percent, 0-100
        lightness: Percent, 0-100
    """
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness / 100.0, saturation / 100.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


class DrawingSurface(ABC):
    """The operations the renderer needs from a canvas."""

    @abstractmethod
    def clear(self, color: Color = BLACK) -> None:
        """Wipe the whole surface."""

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a solid rectangle with its top-left corner at (x, y)."""

    @abstractmethod
    def fill_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: Color,
        alpha: float = 1.0,
        glow: int = 0,
    ) -> None:
        """
        Draw a disc centered at (x, y).

        Args:
            alpha: Opacity in [0, 1]
            glow: Halo size around the disc, 0 for none
        """

    @abstractmethod
    def dashed_line(
        self,
        start: Tuple[float, float],
        end: Tuple[float, float],
        color: Color,
        dash: int,
    ) -> None:
        """Stroke a line of alternating dashes and gaps of equal length."""


class PygameSurface(DrawingSurface):
    """DrawingSurface backed by a pygame Surface."""

    def __init__(self, screen: "pygame.Surface"):
        self.screen = screen

    def clear(self, color: Color = BLACK) -> None:
        self.screen.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def fill_circle(self, x, y, radius, color, alpha=1.0, glow=0) -> None:
        if glow > 0:
            self._draw_glow(x, y, radius, color, glow)

        if alpha >= 1.0:
            pygame.draw.circle(self.screen, color, (int(x), int(y)), int(round(radius)))
            return

        size = int(round(radius)) * 2 + 2
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surf, (*color, int(255 * max(0.0, alpha))), (size // 2, size // 2), int(round(radius)))
        self.screen.blit(surf, (int(x) - size // 2, int(y) - size // 2))

    def _draw_glow(self, x, y, radius, color, glow) -> None:
        # Concentric translucent rings fading out from the disc edge
        outer = int(round(radius)) + glow
        surf = pygame.Surface((outer * 2, outer * 2), pygame.SRCALPHA)
        for r in range(outer, int(round(radius)), -1):
            a = int(90 * (1 - (r - radius) / glow) ** 2)
            pygame.draw.circle(surf, (*color, a), (outer, outer), r)
        self.screen.blit(surf, (int(x) - outer, int(y) - outer))

    def dashed_line(self, start, end, color, dash) -> None:
        (x1, y1), (x2, y2) = start, end
        length = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
        if length == 0:
            return
        dx, dy = (x2 - x1) / length, (y2 - y1) / length
        pos = 0.0
        while pos < length:
            seg_end = min(pos + dash, length)
            pygame.draw.line(
                self.screen,
                color,
                (int(x1 + dx * pos), int(y1 + dy * pos)),
                (int(x1 + dx * seg_end), int(y1 + dy * seg_end)),
            )
            pos += 2 * dash

    def draw_text(self, text: str, center: Tuple[int, int], font: "pygame.font.Font", color: Color = WHITE) -> None:
        image = font.render(text, True, color)
        self.screen.blit(image, image.get_rect(center=center))


class Renderer:
    """Draws one frame of the game. Never modifies the state."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def ball_color(self, hue: float) -> Color:
        return hsl_to_rgb(hue, self.config.ball_saturation, self.config.ball_lightness)

    def render(self, state: GameState, surface: DrawingSurface) -> None:
        surface.clear(BLACK)
        self._draw_net(surface)
        self._draw_paddles(state, surface)
        self._draw_trail(state, surface)
        self._draw_ball(state, surface)

    def _draw_net(self, surface: DrawingSurface) -> None:
        center_x = self.config.surface_width / 2
        surface.dashed_line(
            (center_x, 0), (center_x, self.config.surface_height), WHITE, self.config.net_dash
        )

    def _draw_paddles(self, state: GameState, surface: DrawingSurface) -> None:
        c = self.config
        surface.fill_rect(c.player_x, state.player_paddle_y, c.paddle_width, c.paddle_height, WHITE)
        surface.fill_rect(c.computer_x, state.computer_paddle_y, c.paddle_width, c.paddle_height, WHITE)

    def _draw_trail(self, state: GameState, surface: DrawingSurface) -> None:
        # Oldest first, faintest and smallest
        count = len(state.ball_trail)
        for i, sample in enumerate(state.ball_trail):
            surface.fill_circle(
                sample.x,
                sample.y,
                self.config.ball_radius + i * 0.5,
                self.ball_color(sample.hue),
                alpha=(i + 1) / (count * 2),
            )

    def _draw_ball(self, state: GameState, surface: DrawingSurface) -> None:
        surface.fill_circle(
            state.ball_x,
            state.ball_y,
            self.config.ball_radius,
            self.ball_color(state.ball_color_hue),
            glow=self.config.glow_blur,
        )


class GameWindow:
    """Pygame window that shows rendered frames and the scoreboard."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

        pygame.init()
        self.screen = pygame.display.set_mode((self.config.surface_width, self.config.surface_height))
        pygame.display.set_caption("Neon Pong")
        self.surface = PygameSurface(self.screen)
        self.renderer = Renderer(self.config)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 24)

    def render(self, state: GameState, scoreboard: Scoreboard, paused: bool = False) -> None:
        self.renderer.render(state, self.surface)
        self.surface.draw_text(scoreboard.text, (self.config.surface_width // 2, 30), self.font)
        if paused:
            self.surface.draw_text(
                "PAUSED",
                (self.config.surface_width // 2, self.config.surface_height // 2),
                self.font,
                GRAY,
            )
        pygame.display.flip()

    def tick(self, fps: Optional[int] = None) -> None:
        self.clock.tick(self.config.fps if fps is None else fps)

    def close(self) -> None:
        pygame.quit()
