# client/renderer.py
from typing import Optional, Tuple

import pygame

from pong.constants import BLACK, BORDER_THICKNESS, SCORE_TEXT_OFFSET
from pong.entities import GameSnapshot
from pong.game_config import Settings


# ---------------- Layout ----------------
def field_rect(settings: Settings, size: Tuple[int, int]) -> pygame.Rect:
    w, h = size
    return pygame.Rect(
        round(settings.margin_h * w),
        round(settings.margin_v * h),
        round((1 - 2 * settings.margin_h) * w),
        round((1 - 2 * settings.margin_v) * h),
    )


def to_screen(x: float, y: float, settings: Settings, size: Tuple[int, int]) -> Tuple[float, float]:
    """Unit-frame point -> pixel point inside the margin-inset field."""
    w, h = size
    return (
        (x * (1 - 2 * settings.margin_h) + settings.margin_h) * w,
        (y * (1 - 2 * settings.margin_v) + settings.margin_v) * h,
    )


def ball_radius_px(radius: float, size: Tuple[int, int]) -> float:
    return radius * min(size)


def paddle_rects(snap: GameSnapshot, settings: Settings,
                 size: Tuple[int, int]) -> Tuple[pygame.Rect, pygame.Rect]:
    w, h = size
    pw = settings.paddle_width * (1 - 2 * settings.margin_h) * w
    ph = snap.paddle_height * (1 - 2 * settings.margin_v) * h

    left_x, left_y = to_screen(0.0, snap.left_position, settings, size)
    _, right_y = to_screen(0.0, snap.right_position, settings, size)
    # right paddle hangs one paddle width inside the right margin
    right_x = (1 - settings.margin_h - settings.paddle_width) * w

    left = pygame.Rect(round(left_x), round(left_y), round(pw), round(ph))
    right = pygame.Rect(round(right_x), round(right_y), round(pw), round(ph))
    return left, right


def score_position(settings: Settings, size: Tuple[int, int]) -> Tuple[int, int]:
    w, h = size
    return w // 2, round((settings.margin_v + SCORE_TEXT_OFFSET) * h)


# ---------------- Draw ----------------
class Renderer:
    def __init__(self, settings: Settings, font: Optional[pygame.font.Font] = None):
        self.settings = settings
        self.font = font or pygame.font.Font(settings.font_path, 48)

    def draw(self, surface: pygame.Surface, snap: GameSnapshot):
        size = surface.get_size()
        color = self.settings.color

        surface.fill(BLACK)

        thickness = max(1, round(BORDER_THICKNESS * size[0]))
        pygame.draw.rect(surface, color, field_rect(self.settings, size), thickness)

        cx, cy = to_screen(*snap.ball_position, self.settings, size)
        radius = max(1, round(ball_radius_px(snap.ball_radius, size)))
        pygame.draw.circle(surface, color, (round(cx), round(cy)), radius)

        for rect in paddle_rects(snap, self.settings, size):
            pygame.draw.rect(surface, color, rect)

        left, right = snap.score
        txt = self.font.render(f"{left} - {right}", True, color)
        surface.blit(txt, txt.get_rect(center=score_position(self.settings, size)))
