import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pong.ball import reset_game
from pong.game_config import Settings


@pytest.fixture
def settings():
    return Settings(window_width=800, window_height=600)


@pytest.fixture
def game(settings):
    return reset_game(settings)


@pytest.fixture
def pygame_ready():
    pygame.init()
    yield
    pygame.quit()
