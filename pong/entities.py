# pong/entities.py
from dataclasses import dataclass, field
from typing import Tuple

from pong.vector import Vec2


@dataclass
class Paddle:
    height: float
    position: float       # y of the top edge
    velocity: float = 0.0

    @property
    def center(self) -> float:
        return self.position + self.height / 2

    @property
    def bottom(self) -> float:
        return self.position + self.height


@dataclass
class Ball:
    radius: float
    position: Vec2
    velocity: Vec2


@dataclass
class Score:
    left: int = 0
    right: int = 0

    def __str__(self) -> str:
        return f"{self.left} - {self.right}"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the renderer needs for one frame."""
    left_position: float
    right_position: float
    paddle_height: float
    ball_position: Tuple[float, float]
    ball_radius: float
    score: Tuple[int, int]


@dataclass
class Game:
    left: Paddle
    right: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            left_position=self.left.position,
            right_position=self.right.position,
            paddle_height=self.left.height,
            ball_position=(self.ball.position.x, self.ball.position.y),
            ball_radius=self.ball.radius,
            score=(self.score.left, self.score.right),
        )
