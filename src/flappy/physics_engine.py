"""
physics_engine.py: The per-frame world simulation and input handling.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import (
    SCREEN_WIDTH, PIPE_SPEED, PIPE_SPAWN_INTERVAL, PIPE_GAP,
    PIPE_MARGIN, BIRD_X, RESPAWN_Y, BG_SCROLL_SPEED, RESTART_COOLDOWN,
    FLAP_ANIMATION_TIME
)
from .data_models import Bird, Pipe, GameContext, GameState, SoundEvent
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the rules of a game: advancing a GameContext one step at a time
    and reacting to flap input. Inherits physics and collision from
    PhysicsCore.

    Times passed to step() and flap() come from a monotonic clock; tests
    pass their own.
    """
    screen_width: float = SCREEN_WIDTH
    pipe_speed: float = PIPE_SPEED
    pipe_spawn_interval: int = PIPE_SPAWN_INTERVAL
    background_width: float = SCREEN_WIDTH
    restart_cooldown: float = RESTART_COOLDOWN
    flap_animation_time: float = FLAP_ANIMATION_TIME
    rng: random.Random = field(default_factory=random.Random)
    on_sound: Optional[Callable[[SoundEvent], None]] = None

    def new_context(self) -> GameContext:
        ctx = GameContext()
        self.reset(ctx)
        return ctx

    def reset(self, ctx: GameContext):
        """Puts a context back to the start screen, keeping the high score."""
        ctx.bird = Bird(x=BIRD_X, y=RESPAWN_Y)
        ctx.pipes = []
        ctx.score = 0
        ctx.frame = 0
        ctx.bg_x = 0.0
        ctx.flap_until = 0.0
        ctx.state = GameState.START

    def flap(self, ctx: GameContext, now: float) -> bool:
        """
        Handles one flap input. Starts a game from the start screen, or
        restarts one once the post-crash cooldown is over.

        Returns False when the input was ignored.
        """
        if ctx.state == GameState.GAME_OVER and not ctx.can_restart(now):
            return False

        if ctx.state != GameState.PLAYING:
            self.reset(ctx)
            ctx.state = GameState.PLAYING
            logger.info("Game started (high score %d)", ctx.high_score)

        ctx.bird.velocity = self.flap_velocity()
        ctx.bird.flapping = True
        ctx.flap_until = now + self.flap_animation_time
        self._emit(SoundEvent.FLAP)
        return True

    def step(self, ctx: GameContext, now: float):
        """
        The main simulation step. Does nothing unless a game is in
        progress; mutates the bird, pipes and score otherwise.
        """
        if ctx.state != GameState.PLAYING:
            return

        bird = ctx.bird

        if bird.flapping and now >= ctx.flap_until:
            bird.flapping = False

        # 1. Background scroll
        if self.background_width > 0:
            ctx.bg_x -= BG_SCROLL_SPEED
            if ctx.bg_x <= -self.background_width:
                ctx.bg_x += self.background_width

        # 2. Bird physics and rotation
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        bird.angle = self.rotate_towards(bird.angle, bird.velocity)
        points = self.sample_points(bird)

        # 3. Floor / ceiling
        if self.hits_bounds(bird, points):
            self._game_over(ctx, now)
            return

        # 4. Spawn, move, collide, score and drop pipes
        if ctx.frame % self.pipe_spawn_interval == 0:
            self._spawn_pipe(ctx)

        bird_center_x = bird.center.x
        for i in range(len(ctx.pipes) - 1, -1, -1):
            pipe = ctx.pipes[i]
            pipe.x -= self.pipe_speed

            if self.hits_pipe(pipe, points):
                self._game_over(ctx, now)

            if ctx.state == GameState.PLAYING and not pipe.passed and bird_center_x >= pipe.center_x:
                pipe.passed = True
                ctx.score += 1
                self._emit(SoundEvent.SCORE)

            if pipe.right < 0:
                del ctx.pipes[i]

        if ctx.state == GameState.PLAYING:
            ctx.frame += 1

    def _spawn_pipe(self, ctx: GameContext):
        """Adds a pipe at the right edge with its gap inside the safe band."""
        low = PIPE_MARGIN
        high = max(low, self.screen_height - PIPE_GAP - PIPE_MARGIN)
        gap_y = self.rng.uniform(low, high)
        ctx.pipes.append(Pipe(x=float(self.screen_width), gap_y=gap_y))
        logger.debug("Spawned pipe at frame %d with gap at %.1f", ctx.frame, gap_y)

    def _game_over(self, ctx: GameContext, now: float):
        if ctx.state == GameState.GAME_OVER:
            return

        ctx.state = GameState.GAME_OVER
        self.clamp_to_field(ctx.bird)
        ctx.bird.flapping = False
        if ctx.score > ctx.high_score:
            ctx.high_score = ctx.score
            logger.info("New high score: %d", ctx.high_score)
        ctx.restart_at = now + self.restart_cooldown
        self._emit(SoundEvent.HIT)
        logger.info("Game over at frame %d, score %d", ctx.frame, ctx.score)

    def _emit(self, event: SoundEvent):
        if self.on_sound is not None:
            self.on_sound(event)
