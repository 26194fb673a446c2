# particles.py
# Cosmetic bursts (pickup sparkles). Gameplay fires these and forgets them;
# nothing reads particle state back.

from __future__ import annotations
import math
import random
import pygame
from . import settings


class Particle:
    def __init__(self, pos: tuple[float, float], vel: tuple[float, float],
                 color: tuple[int, int, int], life: int, size: float):
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(vel)
        self.color = color
        self.life = life
        self.max_life = life
        self.size = size

    @property
    def alpha(self) -> int:
        return int(255 * max(0, self.life) / self.max_life)

    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self) -> None:
        self.pos += self.vel
        self.vel.y += settings.PARTICLE_GRAVITY
        self.life -= 1
        self.size *= settings.PARTICLE_SHRINK

    def draw(self, surface: pygame.Surface) -> None:
        radius = max(1, int(self.size / 2))
        dot = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(dot, (*self.color, self.alpha), (radius, radius), radius)
        surface.blit(dot, (self.pos.x - radius, self.pos.y - radius))


class ParticleSystem:
    def __init__(self, rng: random.Random | None = None):
        self.particles: list[Particle] = []
        self.rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.particles)

    def create_explosion(self, x: float, y: float, count: int, color: tuple[int, int, int]) -> None:
        for _ in range(count):
            angle = self.rng.uniform(0.0, 2 * math.pi)
            speed = self.rng.uniform(2.0, 7.0) / 4  # pixels per tick
            life = self.rng.randint(settings.FPS // 2, int(settings.FPS * 1.5))
            size = self.rng.uniform(2.0, 7.0)
            vel = (math.cos(angle) * speed, math.sin(angle) * speed)
            self.particles.append(Particle((x, y), vel, color, life, size))

    def update(self) -> None:
        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if not p.is_dead()]

    def clear(self) -> None:
        self.particles.clear()

    def draw(self, surface: pygame.Surface) -> None:
        for p in self.particles:
            p.draw(surface)
