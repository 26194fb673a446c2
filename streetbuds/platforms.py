# platforms.py
# Static level geometry. Platforms never move and never change.

from __future__ import annotations
from dataclasses import dataclass
import pygame
from . import settings


@dataclass(frozen=True)
class Platform:
    x: int
    y: int
    width: int
    height: int
    # Carried for level data. Collision treats solid and non-solid alike.
    solid: bool = True

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, settings.PLATFORM_COLOR, self.rect)
