# game_loop.py

import argparse
import sys
from typing import Callable, Optional

import pygame

import config
from config import FPS, settings_data
from game import Game
from input_state import InputMapper
from logging_utils import log_debug
from renderer import Renderer
from ui import PanelOverlay, load_panel_content


class GameLoop:
    """One update + one render per display frame until stopped.

    If either callback raises, the loop stops before re-raising so no
    further frames run on a half-updated state.
    """

    def __init__(self, update_fn: Callable[[], None], render_fn: Callable[[], None],
                 fps: int = FPS, clock=None) -> None:
        self.update_fn = update_fn
        self.render_fn = render_fn
        self.fps = fps
        self.clock = clock
        self.running = False
        self.frames = 0

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        if config.LOG_ENABLED:
            log_debug("GameLoop.start")

    def stop(self) -> None:
        if self.running:
            if config.LOG_ENABLED:
                log_debug(f"GameLoop.stop after {self.frames} frames")
        self.running = False

    def tick(self) -> bool:
        if not self.running:
            return False
        try:
            self.update_fn()
            self.render_fn()
        except Exception:
            self.stop()
            raise
        self.frames += 1
        return True

    def run(self, poll_fn: Callable[[], bool]) -> None:
        """Drive ticks at ``fps`` while ``poll_fn`` reports the window is open."""
        if self.clock is None:
            self.clock = pygame.time.Clock()
        self.start()
        while self.running:
            self.clock.tick(self.fps)
            if not poll_fn():
                self.stop()
                break
            self.tick()


def process_events(events, game, mapper, overlay):
    """Route pygame events; returns False once the window should close."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            game.resize(event.w, event.h)
            overlay.layout((event.w, event.h))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            overlay.handle_click(event.pos)
        elif event.type == pygame.KEYDOWN and not game.active:
            if mapper.action_for(event.key) == "toggle":
                mapper.clear()
                game.start()
        elif event.type == pygame.KEYDOWN and mapper.action_for(event.key) == "exit":
            game.stop()
            mapper.clear()
        elif game.active:
            mapper.handle_event(event)
    return True


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Portfolio side-scroller game mode")
    parser.add_argument("--seed", type=int, default=settings_data["SEED"], help="World seed")
    parser.add_argument("--width", type=int, default=settings_data["WIDTH"])
    parser.add_argument("--height", type=int, default=settings_data["HEIGHT"])
    parser.add_argument("--fps", type=int, default=settings_data["FPS"])
    parser.add_argument("--log", action="store_true", help="Write the debug log")
    parser.add_argument("--start", action="store_true", help="Skip the idle screen")
    parser.add_argument("--panels", default=None, help="JSON file overriding the bundled panel text")
    return parser.parse_args(argv)


def run_game(args: argparse.Namespace) -> None:
    if args.log:
        config.LOG_ENABLED = True

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Portfolio Runner")

    content = load_panel_content(args.panels)
    game = Game(args.width, args.height, seed=args.seed, doors=content.keys())
    overlay = PanelOverlay(game, content, (args.width, args.height))
    game.add_listener(overlay.handle_event)
    mapper = InputMapper()
    renderer = Renderer()

    def update():
        game.tick(mapper.sample())

    def render():
        renderer.draw(screen, game.snapshot())
        if game.active:
            overlay.draw(screen)
        pygame.display.flip()

    loop = GameLoop(update, render, fps=args.fps)
    if args.start:
        game.start()
    try:
        loop.run(lambda: process_events(pygame.event.get(), game, mapper, overlay))
    finally:
        pygame.quit()


def main(argv: Optional[list] = None) -> None:
    run_game(parse_args(argv))


if __name__ == "__main__":
    main(sys.argv[1:])
