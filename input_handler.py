"""Input handling for Neon Pong."""

from dataclasses import dataclass
from typing import Callable, Dict

import pygame

from court import clamp_paddle_y
from game import Game

# Logical keys understood by the game
KEY_UP = "up"
KEY_DOWN = "down"

PYGAME_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
}


@dataclass
class InputState:
    """Current state of the driver controls (not the paddle keys)."""

    quit_requested: bool = False
    paused: bool = False
    restart_requested: bool = False


class InputHandler:
    """Translates pointer and key events into game state changes.

    The paddle keys and the pointer write straight into the game state;
    pause, restart and quit are kept in InputState for the game loop.
    """

    def __init__(self, game: Game):
        self.game = game
        self.state = InputState()
        self._key_bindings: Dict[int, Callable[[], None]] = self._setup_bindings()

    def _setup_bindings(self) -> Dict[int, Callable[[], None]]:
        """Configure driver key bindings."""
        return {
            pygame.K_ESCAPE: lambda: setattr(self.state, "quit_requested", True),
            pygame.K_SPACE: lambda: setattr(self.state, "paused", not self.state.paused),
            pygame.K_r: lambda: setattr(self.state, "restart_requested", True),
        }

    def pointer_moved(self, y: float) -> None:
        """Center the player paddle on the pointer, kept inside the court."""
        config = self.game.config
        self.game.state.player_paddle_y = clamp_paddle_y(
            y - config.paddle_height / 2, config
        )

    def key_down(self, key: str) -> None:
        self._set_key(key, True)

    def key_up(self, key: str) -> None:
        self._set_key(key, False)

    def _set_key(self, key: str, pressed: bool) -> None:
        if key == KEY_UP:
            self.game.state.up_pressed = pressed
        elif key == KEY_DOWN:
            self.game.state.down_pressed = pressed

    def handle_event(self, event) -> None:
        """Apply a single pygame event."""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True
        elif event.type == pygame.MOUSEMOTION:
            self.pointer_moved(event.pos[1])
        elif event.type == pygame.KEYDOWN:
            if event.key in PYGAME_KEYS:
                self.key_down(PYGAME_KEYS[event.key])
            elif event.key in self._key_bindings:
                self._key_bindings[event.key]()
        elif event.type == pygame.KEYUP:
            if event.key in PYGAME_KEYS:
                self.key_up(PYGAME_KEYS[event.key])

    def process_events(self) -> None:
        """Process all pending pygame events and update state."""
        for event in pygame.event.get():
            self.handle_event(event)

    def consume_restart_request(self) -> bool:
        """Check and consume restart request flag."""
        if self.state.restart_requested:
            self.state.restart_requested = False
            return True
        return False

    @property
    def running(self) -> bool:
        """True if game should continue running."""
        return not self.state.quit_requested
