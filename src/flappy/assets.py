"""
assets.py: Sprite and background loading with fallbacks.

A missing or broken image never stops the game; the slot stays empty and
the renderer draws a flat-colour stand-in instead.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Set, Union

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH,
    BIRD_IMAGE, BIRD_FLAP_IMAGE, PIPE_TOP_IMAGE, PIPE_BOTTOM_IMAGE,
    BACKGROUND_IMAGE
)

logger = logging.getLogger(__name__)

DEFAULT_ASSET_DIR = Path(__file__).parent / "data"

IMAGE_SLOTS = {
    "bird": BIRD_IMAGE,
    "bird_flap": BIRD_FLAP_IMAGE,
    "pipe_top": PIPE_TOP_IMAGE,
    "pipe_bottom": PIPE_BOTTOM_IMAGE,
    "background": BACKGROUND_IMAGE,
}


class AssetUnavailable(Exception):
    """An image could not be found or decoded."""


def load_image(path: Union[str, Path]) -> pygame.Surface:
    """Loads an image, converting it for fast blits when a display exists."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        raise AssetUnavailable(f"{path}: {e}") from e

    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def scaled_background_width(image: Optional[pygame.Surface],
                            screen_width: int = SCREEN_WIDTH,
                            screen_height: int = SCREEN_HEIGHT) -> float:
    """Width of the background once stretched to the screen height."""
    if image is None:
        return screen_width

    natural_w, natural_h = image.get_size()
    if natural_h > 0:
        width = screen_height * natural_w / natural_h
    else:
        width = natural_w or screen_width
    return max(width, screen_width)


@dataclass
class AssetBundle:
    """Loaded sprites; any of them may be None."""
    bird: Optional[pygame.Surface] = None
    bird_flap: Optional[pygame.Surface] = None
    pipe_top: Optional[pygame.Surface] = None
    pipe_bottom: Optional[pygame.Surface] = None
    background: Optional[pygame.Surface] = None
    background_width: float = SCREEN_WIDTH
    attempted: Set[str] = field(default_factory=set)

    @classmethod
    def load(cls, asset_dir: Union[str, Path] = DEFAULT_ASSET_DIR) -> "AssetBundle":
        bundle = cls()
        asset_dir = Path(asset_dir)

        for slot, filename in IMAGE_SLOTS.items():
            path = asset_dir / filename
            try:
                image = load_image(path)
            except AssetUnavailable as e:
                logger.error("Failed to load %s image: %s", slot, e)
            else:
                logger.debug("Loaded %s image from %s", slot, path)
                setattr(bundle, slot, bundle._fit(slot, image))
            bundle.attempted.add(slot)

        if bundle.is_complete():
            missing = [slot for slot in IMAGE_SLOTS if getattr(bundle, slot) is None]
            if missing:
                logger.warning("Using fallbacks for: %s", ", ".join(missing))
            else:
                logger.info("All game images loaded successfully")
        return bundle

    def _fit(self, slot: str, image: pygame.Surface) -> pygame.Surface:
        """Scales a freshly loaded image to the size it is drawn at."""
        if slot in ("bird", "bird_flap"):
            return pygame.transform.scale(image, (BIRD_WIDTH, BIRD_HEIGHT))
        if slot in ("pipe_top", "pipe_bottom"):
            return pygame.transform.scale(image, (PIPE_WIDTH, image.get_height()))
        if slot == "background":
            self.background_width = scaled_background_width(image)
            return pygame.transform.scale(
                image, (int(round(self.background_width)), SCREEN_HEIGHT))
        return image

    def is_complete(self) -> bool:
        """True once every image has been tried, whether or not it loaded."""
        return self.attempted >= set(IMAGE_SLOTS)

    def bird_sprite(self, flapping: bool) -> Optional[pygame.Surface]:
        """The sprite for the bird's current pose, or whichever one exists."""
        if flapping and self.bird_flap is not None:
            return self.bird_flap
        return self.bird if self.bird is not None else self.bird_flap
