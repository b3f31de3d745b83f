"""sound effects. audio is a nicety: every failure here is logged and swallowed."""

import logging
import os

import pygame

from .config import FX_DIR

logger = logging.getLogger(__name__)


def init_mixer():
    """start the mixer; returns False when the platform has no usable audio."""
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
    except pygame.error as e:
        logger.warning("audio disabled, mixer failed to start: %s", e)
        return False
    return True


def load_sound(name, volume=1.0, fx_dir=FX_DIR):
    """load a sound from fx_dir with a set volume; returns pygame.mixer.Sound or None."""
    path = os.path.join(fx_dir, name)
    try:
        s = pygame.mixer.Sound(path)
        s.set_volume(volume)
        return s
    except (pygame.error, FileNotFoundError) as e:
        logger.warning("could not load sound %s: %s", path, e)
        return None


def play(sound):
    """fire and forget; a missing sound or a busy device is not the player's problem."""
    if sound is None:
        return
    try:
        sound.play()
    except pygame.error as e:
        logger.debug("sound playback failed: %s", e)
