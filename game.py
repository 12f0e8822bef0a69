"""Game logic for Neon Pong."""

import random
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Tuple, Optional, Dict, Any

from config import Config
from court import ball_box, clamp_paddle_y, paddle_rect
from computer import track_ball
from debug import DebugLogger, EventType, GameValidator
from scoreboard import ScoreSink
from trail import BallTrail


class Side(Enum):
    """Which paddle a point or hit belongs to."""

    PLAYER = "player"
    COMPUTER = "computer"


@dataclass
class GameState:
    """
    The whole mutable state of a match.

    Paddle positions are top offsets; the ball position is its center.
    Only the simulation step and the input handler write to it.
    """

    player_paddle_y: float
    computer_paddle_y: float
    ball_x: float
    ball_y: float
    ball_velocity_x: float = 0.0
    ball_velocity_y: float = 0.0
    player_score: int = 0
    computer_score: int = 0
    ball_color_hue: float = 0.0
    ball_trail: BallTrail = dataclass_field(default_factory=BallTrail)
    up_pressed: bool = False
    down_pressed: bool = False


@dataclass
class StepResult:
    """Result of a single simulation step."""

    player_hit: bool = False
    computer_hit: bool = False
    wall_bounce: bool = False
    scorer: Optional[Side] = None  # Who scored this step, if anyone


def serve_velocity(config: Config, rng: random.Random) -> Tuple[float, float]:
    """
    Pick a serve velocity with independent random signs.

    Returns:
        (vx, vy) with |vx| = serve_speed_x and |vy| = serve_speed_y
    """
    vx = config.serve_speed_x * rng.choice([-1, 1])
    vy = config.serve_speed_y * rng.choice([-1, 1])
    return (vx, vy)


def new_game_state(config: Config, rng: random.Random) -> GameState:
    """Create the opening state: everything centered, scores at zero."""
    paddle_y = (config.surface_height - config.paddle_height) / 2
    center_x, center_y = config.center
    vx, vy = serve_velocity(config, rng)
    return GameState(
        player_paddle_y=paddle_y,
        computer_paddle_y=paddle_y,
        ball_x=center_x,
        ball_y=center_y,
        ball_velocity_x=vx,
        ball_velocity_y=vy,
        ball_trail=BallTrail(config.trail_length),
    )


class Game:
    """
    Main game class that owns the state and advances it frame by frame.

    Handles:
    - Player paddle motion from the held keys
    - Computer paddle tracking
    - Ball motion, wall and paddle collisions
    - Scoring and serving
    - Trail history and hue cycling
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
        score_sink: Optional[ScoreSink] = None,
        logger: Optional[DebugLogger] = None,
    ):
        self.config = config or Config()
        self.rng = rng or random.Random()
        self.score_sink = score_sink
        self.logger = logger or DebugLogger(enabled=False)
        self.validator = GameValidator(self.logger, self.config)

        self.state = new_game_state(self.config, self.rng)
        self.frame = 0

        self.logger.log(
            EventType.GAME_START,
            {"vx": self.state.ball_velocity_x, "vy": self.state.ball_velocity_y},
            "Game started",
        )

    def reset(self) -> GameState:
        """
        Start a new match from scratch.

        Keys still held down stay held in the new state.

        Returns:
            The fresh state
        """
        held = (self.state.up_pressed, self.state.down_pressed)
        self.state = new_game_state(self.config, self.rng)
        self.state.up_pressed, self.state.down_pressed = held
        self.frame = 0
        self.logger.log(EventType.GAME_RESET, {}, "Match restarted")
        self._report_score()
        return self.state

    def reset_ball(self) -> None:
        """Serve a new ball from the center with a random direction and hue."""
        state = self.state
        state.ball_x, state.ball_y = self.config.center
        state.ball_velocity_x, state.ball_velocity_y = serve_velocity(
            self.config, self.rng
        )
        state.ball_color_hue = self.rng.randrange(360)
        state.ball_trail.clear()

        self.logger.log(
            EventType.SERVE,
            {
                "vx": state.ball_velocity_x,
                "vy": state.ball_velocity_y,
                "hue": state.ball_color_hue,
            },
            "Ball served",
        )

    def step(self) -> StepResult:
        """
        Advance the game by one frame.

        Returns:
            StepResult describing the collisions and scoring of this frame
        """
        self.frame += 1
        self.logger.next_frame()

        self._move_player_paddle()
        state = self.state
        state.computer_paddle_y = track_ball(
            state.computer_paddle_y, state.ball_y, self.config
        )

        # Move ball
        state.ball_x += state.ball_velocity_x
        state.ball_y += state.ball_velocity_y

        result = StepResult()
        result.wall_bounce = self._bounce_off_walls()
        result.player_hit = self._hit_paddle(Side.PLAYER)
        result.computer_hit = self._hit_paddle(Side.COMPUTER)
        result.scorer = self._check_score()

        self._report_score()

        # A served ball starts its trail next frame
        if result.scorer is None:
            state.ball_trail.push(state.ball_x, state.ball_y, state.ball_color_hue)
        state.ball_color_hue = (state.ball_color_hue + self.config.hue_cycle_step) % 360

        if self.logger.enabled:
            self.validator.validate(state)

        return result

    def _move_player_paddle(self) -> None:
        state = self.state
        if state.up_pressed:
            state.player_paddle_y -= self.config.paddle_speed
        if state.down_pressed:
            state.player_paddle_y += self.config.paddle_speed
        state.player_paddle_y = clamp_paddle_y(state.player_paddle_y, self.config)

    def _bounce_off_walls(self) -> bool:
        """Reflect off the top or bottom wall, nudging the ball back inside."""
        state = self.state
        radius = self.config.ball_radius
        if state.ball_y - radius < 0 or state.ball_y + radius > self.config.surface_height:
            state.ball_velocity_y = -state.ball_velocity_y
            state.ball_y += state.ball_velocity_y
            self.logger.log(
                EventType.WALL_BOUNCE,
                {"x": state.ball_x, "y": state.ball_y},
                "top" if state.ball_velocity_y > 0 else "bottom",
            )
            return True
        return False

    def _hit_paddle(self, side: Side) -> bool:
        """
        Bounce the ball off a paddle if they overlap.

        The outgoing vertical speed depends on how far from the paddle
        center the ball made contact.
        """
        state = self.state
        config = self.config
        if side == Side.PLAYER:
            paddle_x, paddle_y = config.player_x, state.player_paddle_y
        else:
            paddle_x, paddle_y = config.computer_x, state.computer_paddle_y

        ball = ball_box(state.ball_x, state.ball_y, config.ball_radius)
        if not ball.overlaps(paddle_rect(paddle_x, paddle_y, config)):
            return False

        if side == Side.PLAYER:
            state.ball_velocity_x = abs(state.ball_velocity_x)
        else:
            state.ball_velocity_x = -abs(state.ball_velocity_x)

        impact = paddle_impact(state.ball_y, paddle_y, config.paddle_height)
        state.ball_velocity_y = config.spin_factor * impact
        state.ball_color_hue = (state.ball_color_hue + config.hit_hue_step) % 360

        self.logger.log(
            EventType.PADDLE_HIT,
            {"side": side.value, "impact": impact, "vy": state.ball_velocity_y},
            f"{side.value} paddle hit",
        )
        return True

    def _check_score(self) -> Optional[Side]:
        state = self.state
        radius = self.config.ball_radius
        scorer = None
        if state.ball_x - radius < 0:
            state.computer_score += 1
            scorer = Side.COMPUTER
        elif state.ball_x + radius > self.config.surface_width:
            state.player_score += 1
            scorer = Side.PLAYER

        if scorer is not None:
            self.logger.log(
                EventType.SCORE,
                {"player": state.player_score, "computer": state.computer_score},
                f"Point to {scorer.value}",
            )
            self.reset_ball()
        return scorer

    def _report_score(self) -> None:
        if self.score_sink is not None:
            self.score_sink.update(self.state.player_score, self.state.computer_score)

    def get_observation(self) -> Dict[str, Any]:
        """
        Get a plain snapshot of the current state.

        Returns:
            Dictionary of positions, velocities, scores and hue
        """
        state = self.state
        return {
            "frame": self.frame,
            "ball_x": state.ball_x,
            "ball_y": state.ball_y,
            "ball_vx": state.ball_velocity_x,
            "ball_vy": state.ball_velocity_y,
            "ball_hue": state.ball_color_hue,
            "trail_length": len(state.ball_trail),
            "player_paddle_y": state.player_paddle_y,
            "computer_paddle_y": state.computer_paddle_y,
            "player_score": state.player_score,
            "computer_score": state.computer_score,
        }

    @property
    def scores(self) -> Tuple[int, int]:
        """(player_score, computer_score)"""
        return (self.state.player_score, self.state.computer_score)


def paddle_impact(ball_y: float, paddle_y: float, paddle_height: float) -> float:
    """
    Signed contact offset from the paddle center, normalized by half height.

    Roughly in [-1, 1]; slightly beyond when the ball clips a paddle corner.
    """
    half = paddle_height / 2
    return (ball_y - (paddle_y + half)) / half
