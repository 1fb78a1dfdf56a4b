"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    GRAVITY, FLAP_STRENGTH, SCREEN_HEIGHT,
    MAX_UP_ANGLE, MAX_DOWN_ANGLE, ROTATION_LERP, ROTATION_VELOCITY_THRESHOLD,
    BEAK_INSET, TOP_INSET, BOTTOM_INSET
)
from .data_models import Bird, Pipe, Point


@dataclass
class PhysicsCore:
    """
    Per-step physics shared by the engine. Values are per simulation step,
    not per second.
    """
    gravity: float = GRAVITY
    flap_strength: float = FLAP_STRENGTH
    screen_height: float = SCREEN_HEIGHT
    rotation_lerp: float = ROTATION_LERP

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Calculates new position and velocity after one step."""
        velocity += self.gravity
        y += velocity
        return y, velocity

    def flap_velocity(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.flap_strength

    @staticmethod
    def target_angle(velocity: float) -> float:
        if velocity < 0:
            return MAX_UP_ANGLE
        if velocity > ROTATION_VELOCITY_THRESHOLD:
            return MAX_DOWN_ANGLE
        return 0.0

    def rotate_towards(self, angle: float, velocity: float) -> float:
        """Eases the current angle toward the one implied by velocity."""
        return angle + (self.target_angle(velocity) - angle) * self.rotation_lerp

    @staticmethod
    def sample_points(bird: Bird) -> Tuple[Point, Point, Point]:
        """
        Beak, top and bottom collision points on the rotated bird.

        The points sit slightly inside the sprite's edges so that grazing a
        pipe with a transparent corner does not count as a hit.
        """
        cx, cy = bird.center
        half_w = bird.width / 2
        half_h = bird.height / 2
        cos_a = math.cos(bird.angle)
        sin_a = math.sin(bird.angle)

        def rotated(ox: float, oy: float) -> Point:
            return Point(cx + ox * cos_a - oy * sin_a,
                         cy + ox * sin_a + oy * cos_a)

        return (
            rotated(half_w - BEAK_INSET, 0.0),
            rotated(0.0, -half_h + TOP_INSET),
            rotated(0.0, half_h - BOTTOM_INSET),
        )

    def hits_bounds(self, bird: Bird, points: Tuple[Point, Point, Point]) -> bool:
        """Checks the bird against the floor and ceiling."""
        _, top, bottom = points
        if bottom.y > self.screen_height or top.y < 0:
            return True
        return bird.y < 0 or bird.y + bird.height > self.screen_height

    @staticmethod
    def hits_pipe(pipe: Pipe, points: Tuple[Point, Point, Point]) -> bool:
        """True if any sample point is inside the pipe's solid part."""
        for px, py in points:
            if pipe.x <= px <= pipe.right and (py < pipe.gap_y or py > pipe.gap_bottom):
                return True
        return False

    def clamp_to_field(self, bird: Bird):
        bird.y = max(0.0, min(bird.y, self.screen_height - bird.height))
