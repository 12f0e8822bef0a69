"""Court geometry for Neon Pong."""

from dataclasses import dataclass
from typing import Tuple

from config import Config


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(value, high))


@dataclass
class Rectangle:
    """A rectangle defined by top-left corner and dimensions."""

    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: "Rectangle") -> bool:
        """
        Axis-aligned overlap test.

        Edges that merely touch do not count as overlapping.
        """
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)


def paddle_rect(x: float, y: float, config: Config) -> Rectangle:
    """Rectangle covered by a paddle whose top-left corner is (x, y)."""
    return Rectangle(x, y, config.paddle_width, config.paddle_height)


def ball_box(x: float, y: float, radius: float) -> Rectangle:
    """Bounding box of the ball disc centered at (x, y)."""
    return Rectangle(x - radius, y - radius, 2 * radius, 2 * radius)


def clamp_paddle_y(y: float, config: Config) -> float:
    """Keep a paddle's top offset inside [0, surface_height - paddle_height]."""
    return clamp(y, 0, config.max_paddle_y)
