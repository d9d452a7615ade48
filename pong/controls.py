# pong/controls.py
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class Direction(IntEnum):
    UP = -1
    NONE = 0
    DOWN = 1


@dataclass(frozen=True)
class Controls:
    left: Direction = Direction.NONE
    right: Direction = Direction.NONE

    @classmethod
    def idle(cls) -> "Controls":
        return cls()


class InputProvider(Protocol):
    def poll(self) -> Controls:
        ...
