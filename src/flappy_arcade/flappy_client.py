#!/usr/bin/env python3
"""
flappy_client.py

Window loop: pygame events -> session commands -> tick -> render, once per frame.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from .config import GameConfig
from .constants import TARGET_FPS, WINDOW_TITLE
from .game_engine import GameSession
from .input_adapter import InputAdapter
from .renderer import draw_frame, load_fonts, restart_button_rect

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None, fps: int = TARGET_FPS):
        pygame.init()
        self.config = config or GameConfig()
        self.fps = fps
        self.screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Game Logic ---
        self.session = GameSession(self.config, rng=random.Random(seed))
        self.input = InputAdapter(
            restart_button=restart_button_rect(self.config.screen_width, self.config.screen_height))

        self.session.add_game_over_listener(
            lambda score: pygame.display.set_caption(f"{WINDOW_TITLE} - final score {score}"))
        self.session.add_score_listener(
            lambda score: pygame.display.set_caption(f"{WINDOW_TITLE} - {score}"))

        self.clock = pygame.time.Clock()
        self.fonts = load_fonts()

    def step(self):
        """One frame: apply this frame's commands, advance the simulation, draw."""
        commands = self.input.translate(pygame.event.get(), self.session.state)
        for command in commands:
            self.session.dispatch(command)

        self.session.tick()

        draw_frame(self.screen, self.session.snapshot(), self.fonts)
        pygame.display.flip()

    def run(self):
        """The main client execution loop."""
        logger.info("Window open at %dx%d, %d fps",
                    self.config.screen_width, self.config.screen_height, self.fps)
        try:
            while not self.input.quit_requested:
                self.clock.tick(self.fps)
                self.step()
        finally:
            pygame.quit()
            logger.info("Window closed")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Arcade.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for a repeatable pipe sequence.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=TARGET_FPS,
        help=f"Frames (and simulation ticks) per second (default: {TARGET_FPS}).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    client = FlappyClient(seed=args.seed, fps=args.fps)
    client.run()


if __name__ == "__main__":
    main()
