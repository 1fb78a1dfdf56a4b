import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy.physics_engine import GameEngine


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def engine(sounds):
    return GameEngine(rng=random.Random(1234), on_sound=sounds.append)


@pytest.fixture
def ctx(engine):
    return engine.new_context()


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((320, 480))
    pygame.font.quit()
