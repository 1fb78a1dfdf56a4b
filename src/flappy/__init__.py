"""
Flappy: a single-screen Flappy Bird clone built on pygame.
"""

from .data_models import Bird, Pipe, GameContext, GameState, SoundEvent
from .physics_engine import GameEngine

__all__ = ["Bird", "Pipe", "GameContext", "GameState", "SoundEvent", "GameEngine"]
