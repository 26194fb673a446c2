# levels.py
# Level registry + the built-in levels.
#
# The registry is a plain object owned by the Game and handed to the session;
# it only hands out immutable definitions and tracks which one is current.

from __future__ import annotations
import logging
from typing import Sequence
from .collectible import CollectibleKind
from .enemies import EnemyKind
from .level import CollectibleSpawn, EnemySpawn, Level, LevelDefinition
from .platforms import Platform

logger = logging.getLogger(__name__)

COIN = CollectibleKind.COIN
POWER_UP = CollectibleKind.POWER_UP
HEALTH = CollectibleKind.HEALTH


class LevelRegistry:
    def __init__(self, definitions: Sequence[LevelDefinition]):
        if not definitions:
            raise ValueError("LevelRegistry needs at least one level definition.")
        self.definitions = tuple(definitions)
        self.index = 0

    def __len__(self) -> int:
        return len(self.definitions)

    @property
    def level_number(self) -> int:
        """1-based number of the current level (for the HUD)."""
        return self.index + 1

    def current(self) -> LevelDefinition:
        return self.definitions[self.index]

    def advance(self) -> LevelDefinition:
        """Move to the next level, wrapping back to the first after the last."""
        self.index = (self.index + 1) % len(self.definitions)
        logger.info("Advancing to level %d/%d (%s)", self.level_number, len(self), self.current().name)
        return self.current()

    def reset(self) -> None:
        self.index = 0

    def build_current(self) -> Level:
        return Level(self.current())


def default_levels() -> list[LevelDefinition]:
    floor = Platform(0, 450, 800, 50, solid=True)

    level1 = LevelDefinition(
        name="Level 1",
        spawn_point=(100, 390),
        platforms=(
            floor,
            Platform(100, 350, 100, 20, solid=False),
            Platform(300, 300, 100, 20, solid=False),
            Platform(500, 250, 100, 20, solid=False),
        ),
        enemies=(
            EnemySpawn(200, 420),
            EnemySpawn(400, 420),
        ),
        collectibles=(
            CollectibleSpawn(150, 300, 20, 20, COIN, 100),
            CollectibleSpawn(350, 250, 20, 20, COIN, 100),
            CollectibleSpawn(550, 200, 20, 20, POWER_UP, 200),
            CollectibleSpawn(40, 420, 20, 20, COIN, 100),
            CollectibleSpawn(740, 420, 20, 20, COIN, 100),
            CollectibleSpawn(340, 200, 20, 20, COIN, 200),
            CollectibleSpawn(560, 150, 20, 20, COIN, 100),
        ),
    )

    level2 = LevelDefinition(
        name="Level 2",
        spawn_point=(100, 390),
        platforms=(
            floor,
            Platform(150, 350, 100, 20, solid=False),
            Platform(350, 300, 100, 20, solid=False),
            Platform(550, 250, 100, 20, solid=False),
            Platform(250, 200, 100, 20, solid=False),
        ),
        enemies=(
            EnemySpawn(200, 420),
            EnemySpawn(400, 420),
            EnemySpawn(600, 420),
            EnemySpawn(700, 426, EnemyKind.RUNNER),
        ),
        collectibles=(
            CollectibleSpawn(200, 300, 20, 20, COIN, 100),
            CollectibleSpawn(400, 250, 20, 20, COIN, 100),
            CollectibleSpawn(600, 200, 20, 20, HEALTH, 0),
            CollectibleSpawn(50, 420, 20, 20, COIN, 100),
            CollectibleSpawn(720, 420, 20, 20, COIN, 100),
            CollectibleSpawn(290, 150, 20, 20, COIN, 200),
            CollectibleSpawn(420, 240, 20, 20, COIN, 100),
        ),
    )

    return [level1, level2]
