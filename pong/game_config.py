# pong/game_config.py
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from pong.constants import WHITE


class ConfigurationError(Exception):
    """Startup configuration is unusable; the game cannot start."""


@dataclass(frozen=True)
class Settings:
    window_width: int = 1280
    window_height: int = 720

    # all lengths below are fractions of the play field
    paddle_width: float = 0.01
    paddle_height: float = 0.2

    margin_v: float = 0.05
    margin_h: float = 0.05

    paddle_speed: float = 1.75   # units/s
    ball_speed: float = 0.8      # units/s
    ball_radius: float = 0.01

    color: Tuple[int, int, int] = WHITE
    font_path: Optional[str] = None

    @property
    def serve_offset(self) -> float:
        return self.ball_radius + self.margin_h + self.paddle_width


CFG = Settings()


def parse_window_size(args: Sequence[str]) -> Optional[Tuple[int, int]]:
    """
    Window size from positional CLI args.
    No args -> None (caller falls back to the desktop size).
    """
    if not args:
        return None
    if len(args) != 2:
        raise ConfigurationError(f"Expected WIDTH HEIGHT, got {len(args)} value(s).")

    try:
        width, height = int(args[0]), int(args[1])
    except ValueError:
        raise ConfigurationError("Window dimensions invalid.") from None

    if width <= 0 or height <= 0:
        raise ConfigurationError("Window dimensions must be positive.")
    return width, height
