# audio.py
# Best-effort sound. Nothing in here may break a tick: a missing file or a dead
# mixer is logged once and that cue just stays silent.

from __future__ import annotations
import logging
import os
import pygame
from . import settings

logger = logging.getLogger(__name__)


def asset_path(*parts: str) -> str:
    """Build a path relative to the project root."""
    here = os.path.dirname(os.path.dirname(__file__))
    return os.path.join(here, "assets", *parts)


def load_sound(*parts: str) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(asset_path("audio", *parts))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class SoundManager:
    def __init__(self, enabled: bool = not settings.SOUND_OFF, volume: float = settings.SFX_VOLUME):
        self.enabled = enabled
        self.volume = clamp(volume, 0.0, 1.0)
        self.music_volume = settings.MUSIC_VOLUME
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        self.music_playing = False

        if self.enabled and not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio disabled, mixer failed to start: %s", e)
                self.enabled = False

    def load_defaults(self) -> None:
        for name, filename in settings.SOUND_FILES.items():
            self.load_sound(name, filename)

    def load_sound(self, name: str, filename: str) -> None:
        if not self.enabled:
            return
        try:
            sound = load_sound(filename)
        except (pygame.error, OSError) as e:
            logger.warning("Could not load sound %r from %s: %s", name, filename, e)
            return
        sound.set_volume(self.volume)
        self.sounds[name] = sound

    def play_sound(self, name: str) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(name)
        if sound is None:
            logger.debug("No sound loaded for %r", name)
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning("Could not play sound %r: %s", name, e)

    def play_background_music(self, filename: str) -> None:
        if not self.enabled:
            return
        self.stop_background_music()
        try:
            pygame.mixer.music.load(asset_path("audio", filename))
            pygame.mixer.music.set_volume(self.music_volume)
            pygame.mixer.music.play(-1)  # loop
        except (pygame.error, OSError) as e:
            logger.warning("Could not play music %s: %s", filename, e)
            return
        self.music_playing = True

    def stop_background_music(self) -> None:
        if not self.music_playing:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            logger.warning("Could not stop music: %s", e)
        self.music_playing = False

    def set_volume(self, volume: float) -> None:
        self.volume = clamp(volume, 0.0, 1.0)
        for sound in self.sounds.values():
            sound.set_volume(self.volume)
        if self.music_playing:
            pygame.mixer.music.set_volume(self.volume)
