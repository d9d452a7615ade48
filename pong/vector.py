# pong/vector.py
import pygame

Vec2 = pygame.math.Vector2


def sign(value: float) -> int:
    return (0 < value) - (value < 0)


def reflect(v: Vec2, normal: Vec2) -> Vec2:
    """Mirror v about a surface with the given normal (normal need not be unit length)."""
    n = normal.normalize()
    return v - 2 * v.dot(n) * n


def rotate(v: Vec2, angle: float) -> Vec2:
    # counter-clockwise in math convention; with y pointing down this turns clockwise on screen
    return v.rotate_rad(angle)
