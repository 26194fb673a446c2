# level.py
# A Level is the live, mutable copy of a LevelDefinition: platforms are shared
# (they never change), enemies and collectibles are built fresh so replaying a
# level starts clean.
#
# Level only ticks its own enemies. Player/enemy and player/pickup
# interactions belong to the session because they touch score and lives.

from __future__ import annotations
from dataclasses import dataclass
import pygame
from . import settings
from .collectible import Collectible, CollectibleKind
from .enemies import Enemy, EnemyKind
from .platforms import Platform


@dataclass(frozen=True)
class EnemySpawn:
    x: int
    y: int
    kind: EnemyKind = EnemyKind.WALKER


@dataclass(frozen=True)
class CollectibleSpawn:
    x: int
    y: int
    width: int
    height: int
    kind: CollectibleKind
    value: int


@dataclass(frozen=True)
class LevelDefinition:
    name: str
    spawn_point: tuple[int, int]
    platforms: tuple[Platform, ...] = ()
    enemies: tuple[EnemySpawn, ...] = ()
    collectibles: tuple[CollectibleSpawn, ...] = ()
    time_limit: int = settings.DEFAULT_TIME_LIMIT
    score_to_complete: int = settings.DEFAULT_SCORE_TO_COMPLETE


class Level:
    def __init__(self, definition: LevelDefinition):
        self.definition = definition

        # Draw order follows insertion order
        self.platforms: list[Platform] = list(definition.platforms)
        self.enemies: list[Enemy] = [Enemy((e.x, e.y), e.kind) for e in definition.enemies]
        self.collectibles: list[Collectible] = [
            Collectible((c.x, c.y), (c.width, c.height), c.kind, c.value)
            for c in definition.collectibles
        ]

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def spawn_point(self) -> tuple[int, int]:
        return self.definition.spawn_point

    @property
    def time_limit(self) -> int:
        return self.definition.time_limit

    @property
    def score_to_complete(self) -> int:
        return self.definition.score_to_complete

    def alive_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.is_alive]

    def remaining_collectibles(self) -> list[Collectible]:
        return [c for c in self.collectibles if not c.collected]

    def update(self) -> None:
        for e in self.enemies:
            e.update()

    def draw(self, surface: pygame.Surface) -> None:
        for p in self.platforms:
            p.draw(surface)

        for e in self.enemies:
            e.draw(surface)

        for c in self.collectibles:
            c.draw(surface)
