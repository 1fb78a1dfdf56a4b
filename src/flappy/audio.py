"""
audio.py: Sound effects for flap, score and hit events.
"""

import logging
from pathlib import Path
from typing import Dict, Union

import pygame

from .constants import FLAP_SOUND, SCORE_SOUND, HIT_SOUND
from .data_models import SoundEvent

logger = logging.getLogger(__name__)

SOUND_FILES = {
    SoundEvent.FLAP: FLAP_SOUND,
    SoundEvent.SCORE: SCORE_SOUND,
    SoundEvent.HIT: HIT_SOUND,
}


class SoundBoard:
    """
    Plays one short effect per SoundEvent. Failures are logged and the
    board stays silent; the game never waits on audio.
    """

    def __init__(self, asset_dir: Union[str, Path], muted: bool = False):
        self.muted = muted
        self._initialized = False
        self._sounds: Dict[SoundEvent, pygame.mixer.Sound] = {}

        if muted:
            logger.info("Audio muted")
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self._initialized = True
        except pygame.error as e:
            logger.warning("Audio unavailable: %s", e)
            return

        for event, filename in SOUND_FILES.items():
            path = Path(asset_dir) / filename
            try:
                self._sounds[event] = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError) as e:
                logger.error("Failed to load %s: %s", filename, e)

    def __call__(self, event: SoundEvent):
        self.play(event)

    def play(self, event: SoundEvent):
        """Restarts the effect for this event from the beginning."""
        if self.muted or not self._initialized:
            return
        sound = self._sounds.get(event)
        if sound is None:
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            logger.warning("Could not play %s sound: %s", event.value, e)

    def close(self):
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
