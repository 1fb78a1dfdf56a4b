#!/usr/bin/env python3
"""
flappy_client.py

Window, input and the fixed-timestep frame loop around GameEngine and
Renderer.
"""

import argparse
import logging
import random
import time
from pathlib import Path
from typing import Optional

import pygame

from .assets import AssetBundle, DEFAULT_ASSET_DIR
from .audio import SoundBoard
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, TICK_TIME, RENDER_FPS,
    MAX_STEPS_PER_FRAME
)
from .physics_engine import GameEngine
from .renderer import Renderer

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


class FlappyClient:
    def __init__(self, asset_dir: Path = DEFAULT_ASSET_DIR, fps: int = RENDER_FPS,
                 muted: bool = False, seed: Optional[int] = None):
        pygame.init()
        # SCALED keeps the logical resolution and letterboxes on resize
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        # --- Collaborators ---
        self.assets = AssetBundle.load(asset_dir)
        self.sounds = SoundBoard(asset_dir, muted=muted)
        self.engine = GameEngine(
            background_width=self.assets.background_width,
            rng=random.Random(seed),
            on_sound=self.sounds,
        )
        self.renderer = Renderer(self.assets)
        self.ctx = self.engine.new_context()

        # Time Management
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.step_timer = 0.0

    def run(self):
        """The main execution loop."""
        if not self.assets.is_complete():
            logger.error("Assets not ready. Exiting.")
            pygame.quit()
            return

        running = True
        while running:
            frame_time = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif self._is_flap(event):
                    self.engine.flap(self.ctx, time.monotonic())

            # --- Simulation Loop (Fixed Timestep) ---
            self.step_timer = min(self.step_timer + frame_time, TICK_TIME * MAX_STEPS_PER_FRAME)
            while self.step_timer >= TICK_TIME:
                self.step_timer -= TICK_TIME
                self.engine.step(self.ctx, time.monotonic())

            self.renderer.draw(self.screen, self.ctx)
            pygame.display.flip()

        logger.info("Quitting. High score this session: %d", self.ctx.high_score)
        self.sounds.close()
        pygame.quit()

    @staticmethod
    def _is_flap(event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN:
            return event.key in FLAP_KEYS
        return event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Single-screen Flappy Bird clone.")
    parser.add_argument("--assets", type=Path, default=DEFAULT_ASSET_DIR,
                        help="directory holding the sprites and sounds")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render frame rate")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe placement")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)
    client = FlappyClient(args.assets, fps=args.fps, muted=args.mute, seed=args.seed)
    client.run()


if __name__ == "__main__":
    main()
