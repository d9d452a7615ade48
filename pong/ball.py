# pong/ball.py
from enum import Enum
from typing import Optional

from pong.constants import BOUNCE_BUFFER, MAX_BOUNCE_ANGLE
from pong.entities import Ball, Game, Paddle, Score
from pong.game_config import Settings
from pong.vector import Vec2, reflect, rotate


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


# ---------------- Reset ----------------
def reset_game(settings: Settings, score: Optional[Score] = None, serve_from_left: bool = False) -> Game:
    offset = settings.serve_offset
    if serve_from_left:
        ball = Ball(settings.ball_radius, Vec2(offset, 0.5), Vec2(settings.ball_speed, 0))
    else:
        ball = Ball(settings.ball_radius, Vec2(1 - offset, 0.5), Vec2(-settings.ball_speed, 0))

    top = 0.5 - settings.paddle_height / 2
    return Game(
        left=Paddle(settings.paddle_height, top, 0.0),
        right=Paddle(settings.paddle_height, top, 0.0),
        ball=ball,
        score=score if score is not None else Score(),
    )


def _serve(game: Game, settings: Settings, serve_from_left: bool):
    # reset in place so callers holding `game` see the new round
    fresh = reset_game(settings, game.score, serve_from_left)
    game.left, game.right, game.ball = fresh.left, fresh.right, fresh.ball


# ---------------- Motion ----------------
def integrate(ball: Ball, dt: float):
    ball.position += ball.velocity * dt


def reflect_off_walls(ball: Ball) -> bool:
    """Top and bottom walls only. Returns True if the ball bounced."""
    if ball.position.y + ball.radius > 1:
        normal = Vec2(0, -1)
        ball.position.y = 1 - ball.radius
    elif ball.position.y - ball.radius < 0:
        normal = Vec2(0, 1)
        ball.position.y = ball.radius
    else:
        return False

    ball.velocity = reflect(ball.velocity, normal)
    return True


# ---------------- Paddles ----------------
def _paddle_missed(ball: Ball, paddle: Paddle) -> bool:
    y, r = ball.position.y, ball.radius
    return y + r + BOUNCE_BUFFER < paddle.position or y - r - BOUNCE_BUFFER > paddle.bottom


def right_paddle_missed(ball: Ball, paddle: Paddle) -> bool:
    """True when the right paddle cannot reach the ball, i.e. the left side may score."""
    return _paddle_missed(ball, paddle)


def left_paddle_missed(ball: Ball, paddle: Paddle) -> bool:
    """True when the left paddle cannot reach the ball, i.e. the right side may score."""
    return _paddle_missed(ball, paddle)


def bounce_angle(ball: Ball, paddle: Paddle) -> float:
    """
    Angle off the horizontal, proportional to where the ball struck the paddle.
    Positive when the ball is above the paddle center; 0 for a dead-center hit.
    """
    half = paddle.height / 2
    relative_intersect_y = (paddle.center - ball.position.y) / half
    relative_intersect_y = max(-1.0, min(1.0, relative_intersect_y))
    return relative_intersect_y * MAX_BOUNCE_ANGLE


def bounce_off_paddles(game: Game, settings: Settings) -> Optional[Side]:
    """At most one bounce per frame; the right paddle is checked first."""
    ball = game.ball
    right_missed = right_paddle_missed(ball, game.right)
    left_missed = left_paddle_missed(ball, game.left)

    if ball.position.x + ball.radius >= 1 - settings.paddle_width and not right_missed:
        ball.position.x = 1 - settings.paddle_width - ball.radius
        angle = bounce_angle(ball, game.right)
        ball.velocity = rotate(Vec2(-1, 0), angle) * settings.ball_speed
        return Side.RIGHT

    if ball.position.x - ball.radius <= settings.paddle_width and not left_missed:
        ball.position.x = settings.paddle_width + ball.radius
        angle = bounce_angle(ball, game.left)
        ball.velocity = rotate(Vec2(1, 0), -angle) * settings.ball_speed
        return Side.LEFT

    return None


# ---------------- Scoring ----------------
def check_score(game: Game, settings: Settings) -> Optional[Side]:
    ball = game.ball
    if ball.position.x + ball.radius >= 1:
        game.score.left += 1
        _serve(game, settings, serve_from_left=True)
        return Side.LEFT

    if ball.position.x - ball.radius <= 0:
        game.score.right += 1
        _serve(game, settings, serve_from_left=False)
        return Side.RIGHT

    return None


def resolve_collisions(game: Game, settings: Settings) -> Optional[Side]:
    """Walls, paddles, then scoring. Returns the side that won a point this frame, if any."""
    reflect_off_walls(game.ball)
    bounce_off_paddles(game, settings)
    return check_score(game, settings)
