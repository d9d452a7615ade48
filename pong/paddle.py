# pong/paddle.py
from pong.constants import PADDLE_ACCELERATION, PADDLE_DECELERATION
from pong.controls import Direction
from pong.entities import Paddle
from pong.game_config import Settings
from pong.vector import sign


def accelerate(paddle: Paddle, direction: Direction, dt: float, settings: Settings):
    if abs(paddle.velocity) == settings.paddle_speed and sign(paddle.velocity) == direction:
        return

    new_velocity = paddle.velocity + direction * PADDLE_ACCELERATION * dt
    if abs(new_velocity) < settings.paddle_speed:
        paddle.velocity = new_velocity
    else:
        paddle.velocity = settings.paddle_speed * direction


def decelerate(paddle: Paddle, dt: float):
    # exact zero check: the clamp below lands on 0.0 exactly
    if paddle.velocity == 0:
        return

    new_speed = abs(paddle.velocity) - PADDLE_DECELERATION * dt
    paddle.velocity = max(0.0, new_speed) * sign(paddle.velocity)


def can_move(paddle: Paddle, direction: int, settings: Settings) -> bool:
    if paddle.position <= 0 and direction == -1:
        return False
    if paddle.position >= 1 - settings.paddle_height and direction == 1:
        return False
    return True


def apply_input(paddle: Paddle, direction: Direction, dt: float, settings: Settings):
    """Down beats up; no key held means the paddle coasts to a stop."""
    if direction == Direction.DOWN:
        accelerate(paddle, Direction.DOWN, dt, settings)
    elif direction == Direction.UP:
        accelerate(paddle, Direction.UP, dt, settings)
    else:
        decelerate(paddle, dt)


def integrate(paddle: Paddle, dt: float, settings: Settings):
    direction = sign(paddle.velocity)
    lowest = 1 - paddle.height

    if can_move(paddle, direction, settings):
        position = paddle.position + paddle.velocity * dt
    elif direction == -1:
        position = 0.0
    else:
        position = lowest

    # a long frame can carry the paddle past the wall in one step
    paddle.position = min(max(position, 0.0), lowest)
