# client/main.py
import argparse
import dataclasses
import logging
import os
import sys
from typing import List, Optional, Sequence

import pygame

from pong.constants import APP_TITLE, FPS
from pong.controls import InputProvider
from pong.game_config import CFG, ConfigurationError, Settings, parse_window_size
from pong.game_world import GameWorld
from client.keyboard import KeyboardInput
from client.renderer import Renderer

log = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 128
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pongpp", description="Two-player Pong.")
    parser.add_argument("size", nargs="*", metavar="WIDTH HEIGHT",
                        help="window size in pixels (default: desktop resolution)")
    parser.add_argument("--font", default=None, help="path to a .ttf font for the score")
    parser.add_argument("--log-level", default=os.getenv("PONG_LOG_LEVEL", "INFO"), type=str.upper,
                        choices=LOG_LEVELS, help="logging level (env PONG_LOG_LEVEL)")
    return parser


def desktop_size() -> Optional[tuple]:
    sizes = pygame.display.get_desktop_sizes()
    return sizes[0] if sizes else None


def load_settings(size_args: Sequence[str], font_path: Optional[str], base: Settings = CFG) -> Settings:
    """Per-run Settings from CLI values. Raises ConfigurationError."""
    size = parse_window_size(size_args)
    if size is None:
        size = desktop_size() or (base.window_width, base.window_height)

    if font_path is not None and not os.path.isfile(font_path):
        raise ConfigurationError(f"Cannot find font: {font_path}")

    return dataclasses.replace(base, window_width=size[0], window_height=size[1], font_path=font_path)


class App:
    def __init__(self, settings: Settings):
        pygame.display.set_caption(APP_TITLE)
        self.settings = settings
        self.screen = self._open_window((settings.window_width, settings.window_height))
        self.clock = pygame.time.Clock()

        self.world = GameWorld(settings)
        self.input: InputProvider = KeyboardInput()
        self.renderer = Renderer(settings)
        self.running = True

    @staticmethod
    def _open_window(size) -> pygame.Surface:
        # SCALED keeps the logical size when the window is resized
        flags = pygame.SCALED | pygame.RESIZABLE
        try:
            return pygame.display.set_mode(size, flags, vsync=1)
        except pygame.error as e:
            log.warning("vsync unavailable (%s), continuing without it", e)
            return pygame.display.set_mode(size, flags)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.world.restart()

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0

                for event in pygame.event.get():
                    self.handle_event(event)

                self.world.update(dt, self.input.poll())

                self.renderer.draw(self.screen, self.world.snapshot())
                pygame.display.flip()
        finally:
            log.info("Final score %s after %d frames", self.world.game.score, self.world.frame)
            pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    try:
        settings = load_settings(args.size, args.font)
    except ConfigurationError as e:
        log.error("%s", e)
        pygame.quit()
        return EXIT_CONFIG_ERROR

    log.info("Window %dx%d, ball_speed=%.2f paddle_speed=%.2f",
             settings.window_width, settings.window_height, settings.ball_speed, settings.paddle_speed)
    App(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
