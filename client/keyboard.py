# client/keyboard.py
from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from pong.controls import Controls, Direction


@dataclass(frozen=True)
class Keymap:
    left_up: int = pygame.K_e
    left_down: int = pygame.K_d
    right_up: int = pygame.K_o
    right_down: int = pygame.K_k


DEFAULT_KEYMAP = Keymap()


def _direction(pressed: Sequence[bool], up_key: int, down_key: int) -> Direction:
    # down is checked first, same priority as the paddle input policy
    if pressed[down_key]:
        return Direction.DOWN
    if pressed[up_key]:
        return Direction.UP
    return Direction.NONE


class KeyboardInput:
    """InputProvider reading the held keys once per frame."""

    def __init__(self, keymap: Keymap = DEFAULT_KEYMAP,
                 get_pressed: Callable[[], Sequence[bool]] = pygame.key.get_pressed):
        self.keymap = keymap
        self._get_pressed = get_pressed

    def poll(self) -> Controls:
        pressed = self._get_pressed()
        km = self.keymap
        return Controls(
            left=_direction(pressed, km.left_up, km.left_down),
            right=_direction(pressed, km.right_up, km.right_down),
        )
