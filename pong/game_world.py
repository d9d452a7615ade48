# pong/game_world.py
import logging
from typing import Optional

from pong import ball as ball_physics
from pong import paddle as paddle_physics
from pong.ball import Side
from pong.controls import Controls
from pong.entities import Game, GameSnapshot
from pong.game_config import Settings

log = logging.getLogger(__name__)


def advance(game: Game, dt: float, settings: Settings, controls: Controls) -> Optional[Side]:
    """
    One simulation frame. The order is part of the game's behaviour:
    the ball moves against last frame's paddles, then input is applied,
    then paddles move, then collisions and scoring are resolved.
    """
    ball_physics.integrate(game.ball, dt)

    paddle_physics.apply_input(game.left, controls.left, dt, settings)
    paddle_physics.apply_input(game.right, controls.right, dt, settings)

    paddle_physics.integrate(game.left, dt, settings)
    paddle_physics.integrate(game.right, dt, settings)

    return ball_physics.resolve_collisions(game, settings)


class GameWorld:
    """
    Owns the one live Game for a run.
    The frame loop feeds it (dt, controls) and reads back a snapshot.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.game: Game = ball_physics.reset_game(settings)
        self.frame: int = 0

    def restart(self):
        self.game = ball_physics.reset_game(self.settings)
        self.frame = 0
        log.info("Match restarted")

    def update(self, dt: float, controls: Controls) -> Optional[Side]:
        if dt < 0:
            return None

        scorer = advance(self.game, dt, self.settings, controls)
        self.frame += 1

        if scorer is not None:
            log.info("Point to %s at frame %d, score %s", scorer.value, self.frame, self.game.score)
        return scorer

    def snapshot(self) -> GameSnapshot:
        return self.game.snapshot()
