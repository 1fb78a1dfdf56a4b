"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple

from .constants import (
    BIRD_X, BIRD_WIDTH, BIRD_HEIGHT, RESPAWN_Y, PIPE_WIDTH, PIPE_GAP
)


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class SoundEvent(Enum):
    """Notifications sent to the audio collaborator."""
    FLAP = "flap"
    SCORE = "score"
    HIT = "hit"


class Point(NamedTuple):
    x: float
    y: float


@dataclass
class Bird:
    """The player's bird. Only y moves; x stays at BIRD_X."""
    x: float = BIRD_X
    y: float = RESPAWN_Y
    velocity: float = 0.0
    angle: float = 0.0             # Radians, positive = nose down
    flapping: bool = False         # Show the flap sprite
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Pipe:
    """A pipe pair; gap_y is the top of the gap."""
    x: float
    gap_y: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + PIPE_WIDTH

    @property
    def center_x(self) -> float:
        return self.x + PIPE_WIDTH / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + PIPE_GAP


@dataclass
class GameContext:
    """
    Everything the simulation and render steps share.

    restart_at and flap_until are monotonic deadlines (seconds); the
    gates they guard open once the current time reaches them.
    """
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    frame: int = 0
    state: GameState = GameState.START
    score: int = 0
    high_score: int = 0
    restart_at: float = 0.0
    flap_until: float = 0.0
    bg_x: float = 0.0

    def can_restart(self, now: float) -> bool:
        return now >= self.restart_at
