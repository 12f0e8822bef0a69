"""Computer paddle controller for Neon Pong."""

from config import Config
from court import clamp_paddle_y


def track_ball(paddle_y: float, ball_y: float, config: Config) -> float:
    """
    Move the computer paddle one frame toward the ball.

    The paddle compares its vertical center with the ball and only moves
    when the ball is outside the dead zone around that center.

    Args:
        paddle_y: Current top offset of the paddle
        ball_y: Vertical center of the ball
        config: Game configuration

    Returns:
        New, clamped top offset of the paddle
    """
    paddle_center = paddle_y + config.paddle_height / 2

    if paddle_center < ball_y - config.computer_dead_zone:
        paddle_y += config.computer_speed
    elif paddle_center > ball_y + config.computer_dead_zone:
        paddle_y -= config.computer_speed

    return clamp_paddle_y(paddle_y, config)
