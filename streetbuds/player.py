# player.py
# The player body: input -> velocity, gravity, then axis-separated collision
# against the level's platforms (X first, then Y).
#
# Everything runs once per fixed tick, so speeds are pixels/tick and the
# invulnerability window is a tick countdown.

from __future__ import annotations
from typing import Iterable
import pygame
from .controls import InputState
from .platforms import Platform
from . import settings


class Player:
    WIDTH = settings.PLAYER_WIDTH
    HEIGHT = settings.PLAYER_HEIGHT

    def __init__(self, pos: tuple[int, int]):
        self.pos = pygame.Vector2(pos)  # float position (top-left)
        self.rect = pygame.Rect(round(self.pos.x), round(self.pos.y), self.WIDTH, self.HEIGHT)
        self.spawn_point = (pos[0], pos[1])

        # Physics
        self.vel = pygame.Vector2(0.0, 0.0)
        self.is_jumping = False
        self.facing_right = True

        # Combat
        self.max_health = settings.PLAYER_MAX_HEALTH
        self.health = self.max_health
        self.invuln_ticks = 0
        self.is_attacking = False

    # --------------------------
    # Health
    # --------------------------

    @property
    def is_invulnerable(self) -> bool:
        return self.invuln_ticks > 0

    def take_damage(self, amount: int) -> None:
        # No clamp here: callers check health <= 0 to decide on a lost life.
        if self.is_invulnerable:
            return
        self.health -= amount
        self.invuln_ticks = settings.INVULNERABILITY_TICKS

    def heal(self, amount: int) -> None:
        self.health = min(self.max_health, self.health + amount)

    def grant_invulnerability(self, ticks: int) -> None:
        self.invuln_ticks = max(self.invuln_ticks, ticks)

    def is_dead(self) -> bool:
        return self.health <= 0

    def respawn(self) -> None:
        self.pos.update(self.spawn_point)
        self.vel.update(0.0, 0.0)
        self.sync_rect()
        self.health = self.max_health
        self.invuln_ticks = settings.INVULNERABILITY_TICKS

    # --------------------------
    # Movement
    # --------------------------

    def jump(self) -> None:
        """Start a jump unless one is already in progress."""
        if not self.is_jumping:
            self.vel.y = settings.JUMP_SPEED
            self.is_jumping = True

    def bounce(self) -> None:
        """Upward kick after a stomp. Works mid-air, unlike jump()."""
        self.vel.y = settings.STOMP_BOUNCE_SPEED
        self.is_jumping = True

    def handle_input(self, inputs: InputState) -> None:
        if inputs.left:
            self.vel.x = -settings.MOVE_SPEED
            self.facing_right = False
        elif inputs.right:
            self.vel.x = settings.MOVE_SPEED
            self.facing_right = True
        else:
            self.vel.x = 0.0

        if inputs.jump:
            self.jump()

    def sync_rect(self) -> None:
        self.rect.x = round(self.pos.x)
        self.rect.y = round(self.pos.y)

    # --------------------------
    # Update
    # --------------------------

    def update(self, inputs: InputState, platforms: Iterable[Platform]) -> None:
        platform_rects = [p.rect for p in platforms]

        self.handle_input(inputs)

        # Gravity, also while rising: that is what makes the arc
        self.vel.y += settings.GRAVITY

        # Horizontal movement
        self.pos.x += self.vel.x
        self.sync_rect()
        self.resolve_horizontal(platform_rects)

        # Vertical movement
        self.pos.y += self.vel.y
        self.sync_rect()
        self.resolve_vertical(platform_rects)

        # Safety floor
        if self.pos.y > settings.FLOOR_CLAMP_Y:
            self.pos.y = settings.FLOOR_CLAMP_Y
            self.sync_rect()
            self.vel.y = 0.0
            self.is_jumping = False

        # Timers
        if self.invuln_ticks > 0:
            self.invuln_ticks -= 1

        # Descending through the air counts as an attack (stomp window)
        self.is_attacking = self.is_jumping and self.vel.y > 0

    def resolve_horizontal(self, platform_rects: list[pygame.Rect]) -> None:
        # Horizontal velocity is left alone; input sets it again next tick.
        for tile_rect in platform_rects:
            if not self.rect.colliderect(tile_rect):
                continue
            if self.vel.x > 0:
                self.rect.right = tile_rect.left
            elif self.vel.x < 0:
                self.rect.left = tile_rect.right
            self.pos.x = self.rect.x  # keep float in sync after collision

    def resolve_vertical(self, platform_rects: list[pygame.Rect]) -> None:
        on_platform = False
        for tile_rect in platform_rects:
            if not self.rect.colliderect(tile_rect):
                continue
            if self.vel.y > 0:
                self.rect.bottom = tile_rect.top
                self.vel.y = 0.0
                self.is_jumping = False
                on_platform = True
            elif self.vel.y < 0:
                self.rect.top = tile_rect.bottom
                self.vel.y = 0.0
            self.pos.y = self.rect.y

        # Stopped without landing (head bump, apex): still airborne
        if not on_platform and self.vel.y == 0:
            self.is_jumping = True

    # --------------------------
    # Draw
    # --------------------------

    def draw(self, surface: pygame.Surface, tick: int = 0) -> None:
        # Blink while invulnerable
        if self.is_invulnerable and (tick // 4) % 2 == 1:
            return

        x, y = self.rect.topleft
        pygame.draw.rect(surface, settings.PLAYER_COLOR, self.rect)
        pygame.draw.ellipse(surface, settings.PLAYER_DETAIL_COLOR, (x + 5, y + 10, 10, 10))
        pygame.draw.ellipse(surface, settings.PLAYER_DETAIL_COLOR, (x + 25, y + 10, 10, 10))
        pygame.draw.line(surface, settings.PLAYER_DETAIL_COLOR, (x + 10, y + 30), (x + 30, y + 30))

        self.draw_health_bar(surface)

        if self.is_attacking:
            halo = pygame.Surface((self.WIDTH + 10, self.HEIGHT + 10), pygame.SRCALPHA)
            pygame.draw.ellipse(halo, settings.ATTACK_HALO_COLOR, halo.get_rect())
            surface.blit(halo, (x - 5, y - 5))

    def draw_health_bar(self, surface: pygame.Surface) -> None:
        bar_w, bar_h = 50, 5
        bx = self.rect.x + (self.WIDTH - bar_w) // 2
        by = self.rect.y - 10
        pygame.draw.rect(surface, settings.HEALTH_BAR_BG, (bx, by, bar_w, bar_h))
        ratio = max(0, self.health) / self.max_health if self.max_health > 0 else 0
        pygame.draw.rect(surface, settings.HEALTH_BAR_FG, (bx, by, int(bar_w * ratio), bar_h))
