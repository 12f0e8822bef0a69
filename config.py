"""Configuration for Neon Pong."""

import json
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Tuple


class ConfigError(ValueError):
    """Raised when a configuration cannot describe a playable court."""


@dataclass
class Config:
    """Configuration parameters for the game."""

    # Surface dimensions
    surface_width: int = 800
    surface_height: int = 600

    # Paddle properties
    paddle_width: int = 15
    paddle_height: int = 100
    paddle_margin: int = 20  # Gap between side wall and paddle
    paddle_speed: float = 6.0
    computer_speed: float = 4.0
    computer_dead_zone: float = 15.0

    # Ball properties
    ball_radius: int = 10
    serve_speed_x: float = 6.0
    serve_speed_y: float = 4.0
    spin_factor: float = 5.0  # Vertical speed for an edge hit

    # Color cycling
    hit_hue_step: float = 40.0
    hue_cycle_step: float = 1.0
    ball_saturation: float = 85.0
    ball_lightness: float = 60.0

    # Trail effect
    trail_length: int = 15

    # Display settings
    glow_blur: int = 25
    net_dash: int = 10
    fps: int = 60

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def save(self, filepath: str) -> None:
        """Save config to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> "Config":
        """Load config from JSON file."""
        try:
            with open(filepath, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config {filepath}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {filepath} must contain a JSON object")
        config = cls.from_dict(data)
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check that the geometry describes a playable court.

        Raises:
            ConfigError: if a value is not a number, or a size is
                non-positive or does not fit
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
        if not isinstance(self.trail_length, int):
            raise ConfigError(f"trail_length must be an integer, got {self.trail_length!r}")
        for name in ("surface_width", "surface_height", "paddle_width",
                     "paddle_height", "ball_radius", "trail_length"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.paddle_height > self.surface_height:
            raise ConfigError("paddle_height cannot exceed surface_height")
        if 2 * (self.paddle_margin + self.paddle_width) >= self.surface_width:
            raise ConfigError("paddles do not fit inside surface_width")
        if self.fps < 0:
            raise ConfigError("fps cannot be negative")

    @property
    def player_x(self) -> float:
        """Left edge of the player paddle."""
        return self.paddle_margin

    @property
    def computer_x(self) -> float:
        """Left edge of the computer paddle."""
        return self.surface_width - self.paddle_width - self.paddle_margin

    @property
    def max_paddle_y(self) -> float:
        """Largest valid top offset of a paddle."""
        return self.surface_height - self.paddle_height

    @property
    def center(self) -> Tuple[float, float]:
        """Midpoint of the surface."""
        return (self.surface_width / 2, self.surface_height / 2)
