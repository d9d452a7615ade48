import logging

import pygame
import pytest

from client.main import EXIT_CONFIG_ERROR, App, build_parser, main
from pong.game_config import Settings


@pytest.mark.parametrize("argv", [["abc", "600"], ["800"], ["800", "600", "--font", "/no/such/font.ttf"]])
def test_bad_configuration_exits_before_loop(argv, caplog, monkeypatch):
    monkeypatch.setattr("client.main.App", None)  # never reached
    with caplog.at_level(logging.ERROR):
        assert main(argv) == EXIT_CONFIG_ERROR
    assert caplog.records


def test_parser_defaults(monkeypatch):
    monkeypatch.delenv("PONG_LOG_LEVEL", raising=False)
    args = build_parser().parse_args([])
    assert args.size == []
    assert args.font is None
    assert args.log_level == "INFO"


def test_parser_log_level_from_env(monkeypatch):
    monkeypatch.setenv("PONG_LOG_LEVEL", "debug")
    assert build_parser().parse_args([]).log_level == "DEBUG"


def test_main_runs_app(monkeypatch):
    ran = []

    class FakeApp:
        def __init__(self, settings):
            ran.append(settings)

        def run(self):
            ran.append("run")

    monkeypatch.setattr("client.main.App", FakeApp)
    assert main(["320", "240"]) == 0
    assert ran[0].window_width == 320 and ran[0].window_height == 240
    assert ran[1] == "run"


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_app_keys(pygame_ready):
    app = App(Settings(window_width=320, window_height=240))
    app.world.game.score.left = 3

    app.handle_event(key(pygame.K_r))
    assert app.world.snapshot().score == (0, 0)
    assert app.running

    app.handle_event(key(pygame.K_ESCAPE))
    assert not app.running

    app.running = True
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running


def test_window_opens_without_vsync(pygame_ready, monkeypatch, caplog):
    calls = []

    def set_mode(size, flags=0, **kwargs):
        calls.append(kwargs)
        if kwargs.get("vsync"):
            raise pygame.error("vsync not supported")
        return pygame.Surface(size)

    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    with caplog.at_level(logging.WARNING, logger="client.main"):
        app = App(Settings(window_width=320, window_height=240))

    assert app.screen.get_size() == (320, 240)
    assert calls == [{"vsync": 1}, {}]
    assert "vsync unavailable" in caplog.text
