# enemies.py
# One Enemy class; variants come from the EnemyKind behaviour table instead of
# subclasses. States: patrolling -> stunned (timed) -> patrolling, or -> dead
# (permanent).

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import pygame
from . import settings


@dataclass(frozen=True)
class EnemyStats:
    speed: int
    damage: int
    width: int
    height: int
    color: tuple[int, int, int]


class EnemyKind(Enum):
    WALKER = EnemyStats(speed=2, damage=100, width=30, height=30, color=(255, 0, 0))
    RUNNER = EnemyStats(speed=4, damage=50, width=24, height=24, color=(255, 140, 0))

    @property
    def stats(self) -> EnemyStats:
        return self.value


class Enemy:
    """Patrol enemy. Walks back and forth between the world edges."""

    def __init__(self, pos: tuple[int, int], kind: EnemyKind = EnemyKind.WALKER):
        stats = kind.stats
        self.kind = kind
        self.rect = pygame.Rect(pos[0], pos[1], stats.width, stats.height)
        self.pos = pygame.Vector2(self.rect.topleft)

        self.speed = stats.speed
        self.damage = stats.damage
        self.direction = 1  # 1 right, -1 left

        self.is_alive = True
        self.stun_ticks = 0

    @property
    def is_stunned(self) -> bool:
        return self.stun_ticks > 0

    def take_damage(self, amount: int, from_above: bool) -> None:
        """A hit from above kills outright; any other hit only stuns.

        ``amount`` is accepted for symmetry with Player.take_damage but never
        reduces anything: stuns are timed, deaths are instant.
        """
        if not self.is_alive:
            return
        if from_above:
            self.is_alive = False
            self.stun_ticks = 0
        else:
            self.stun_ticks = settings.STUN_TICKS

    def update(self) -> None:
        if not self.is_alive:
            return

        if self.is_stunned:
            self.stun_ticks -= 1
            return

        self.pos.x += self.speed * self.direction
        self.rect.x = round(self.pos.x)

        if self.rect.x <= 0 or self.rect.x >= settings.WORLD_WIDTH - self.rect.width:
            self.direction *= -1

    def draw(self, surface: pygame.Surface) -> None:
        if not self.is_alive:
            return
        color = settings.ENEMY_STUNNED_COLOR if self.is_stunned else self.kind.stats.color
        pygame.draw.rect(surface, color, self.rect)
