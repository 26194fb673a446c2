import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from streetbuds.audio import SoundManager
from streetbuds.level import LevelDefinition
from streetbuds.levels import LevelRegistry
from streetbuds.particles import ParticleSystem
from streetbuds.platforms import Platform
from streetbuds.player import Player
from streetbuds.session import GameSession

FLOOR = Platform(0, 450, 800, 50)
ON_FLOOR = (100, FLOOR.y - Player.HEIGHT)


class RecordingSounds(SoundManager):
    """Silent SoundManager that remembers what it was asked to play."""

    def __init__(self):
        super().__init__(enabled=False)
        self.played = []

    def play_sound(self, name):
        self.played.append(name)

    def play_background_music(self, filename):
        self.played.append(f"music:{filename}")


@pytest.fixture
def grounded_player():
    """Player standing exactly on top of the floor."""
    return Player(ON_FLOOR)


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def particles():
    return ParticleSystem(rng=random.Random(1234))


@pytest.fixture
def level_def():
    """Build a one-off level on a plain floor, player spawning on it."""
    def build(**kwargs):
        kwargs.setdefault("name", "Test")
        kwargs.setdefault("spawn_point", ON_FLOOR)
        kwargs.setdefault("platforms", (FLOOR,))
        return LevelDefinition(**kwargs)
    return build


@pytest.fixture
def make_session(sounds, particles):
    """Session on a single-level registry, already started."""
    def build(*definitions, start=True):
        session = GameSession(LevelRegistry(list(definitions)), sounds, particles)
        if start:
            session.start()
        return session
    return build
