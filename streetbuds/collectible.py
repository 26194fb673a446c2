# collectible.py
# Pickups. Each kind has its own effect in apply(); the score value is handed
# out by the session, not here.

from __future__ import annotations
from enum import Enum
import pygame
from . import settings


class CollectibleKind(Enum):
    COIN = "coin"
    POWER_UP = "power_up"
    HEALTH = "health"


KIND_COLORS = {
    CollectibleKind.COIN: (255, 255, 0),
    CollectibleKind.POWER_UP: (255, 0, 255),
    CollectibleKind.HEALTH: (0, 255, 0),
}


class Collectible:
    def __init__(self, pos: tuple[int, int], size: tuple[int, int], kind: CollectibleKind, value: int):
        self.rect = pygame.Rect(pos[0], pos[1], size[0], size[1])
        self.kind = kind
        self.value = value
        self.collected = False

    def collect(self) -> bool:
        """Mark as collected. Returns True only the first time."""
        if self.collected:
            return False
        self.collected = True
        return True

    def apply(self, player) -> None:
        """What happens to the player when this is picked up."""
        if self.kind is CollectibleKind.HEALTH:
            player.heal(settings.HEALTH_PICKUP_HEAL)
        elif self.kind is CollectibleKind.POWER_UP:
            player.grant_invulnerability(settings.POWER_UP_INVULNERABILITY_TICKS)

    def draw(self, surface: pygame.Surface) -> None:
        if self.collected:
            return
        pygame.draw.ellipse(surface, KIND_COLORS[self.kind], self.rect)
