# session.py
# The game session owns the high-level state machine and everything that
# crosses entity boundaries (score, lives, timer):
# MENU -> PLAYING <-> PAUSED, PLAYING -> (GAME_OVER or LEVEL_COMPLETE) -> PLAYING
#
# It never touches the window. Game feeds it one InputState per tick and draws
# whatever state it is left in.

from __future__ import annotations
import logging
from enum import Enum, auto
from .audio import SoundManager
from .controls import InputState
from .enemies import Enemy
from .level import Level
from .levels import LevelRegistry
from .particles import ParticleSystem
from .player import Player
from . import settings

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    LEVEL_COMPLETE = auto()


class GameSession:
    def __init__(
        self,
        registry: LevelRegistry,
        sounds: SoundManager | None = None,
        particles: ParticleSystem | None = None,
    ):
        self.registry = registry
        self.sounds = sounds
        self.particles = particles

        self.state = GameState.MENU
        self.score = 0
        self.lives = settings.START_LIVES
        self.ticks_elapsed = 0

        self.level: Level | None = None
        self.player: Player | None = None
        self.load_level()

    def load_level(self) -> None:
        self.level = self.registry.build_current()
        self.player = Player(self.level.spawn_point)
        self.ticks_elapsed = 0
        if self.particles is not None:
            self.particles.clear()
        logger.info("Loaded %s", self.level.name)

    # ------------------ Transitions ------------------
    def start(self) -> None:
        if self.state is not GameState.MENU:
            return
        self.ticks_elapsed = 0
        self.state = GameState.PLAYING
        if self.sounds is not None:
            self.sounds.play_background_music(settings.MUSIC_FILE)

    def toggle_pause(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING

    def restart(self) -> None:
        """Back to the first level with a fresh set of lives."""
        if self.state is not GameState.GAME_OVER:
            return
        self.registry.reset()
        self.score = 0
        self.lives = settings.START_LIVES
        self.load_level()
        self.state = GameState.PLAYING

    def continue_to_next_level(self) -> None:
        if self.state is not GameState.LEVEL_COMPLETE:
            return
        self.registry.advance()
        # Every level has its own threshold, so the count starts over.
        self.score = 0
        self.load_level()
        self.state = GameState.PLAYING

    def lose_life(self) -> None:
        self.lives -= 1
        logger.info("Life lost, %d left", self.lives)
        if self.lives <= 0:
            self.state = GameState.GAME_OVER
            logger.info("Game over with score %d", self.score)
        else:
            self.player.respawn()

    # ------------------ Clock ------------------
    def elapsed_seconds(self) -> float:
        return self.ticks_elapsed / settings.FPS

    def remaining_time(self) -> int:
        return max(0, int(self.level.time_limit - self.elapsed_seconds()))

    # ------------------ Tick ------------------
    def tick(self, inputs: InputState) -> None:
        if self.state is not GameState.PLAYING:
            return

        self.level.update()
        self.player.update(inputs, self.level.platforms)

        self.resolve_enemy_contacts()
        if self.state is not GameState.PLAYING:
            return

        self.resolve_pickups()

        if self.particles is not None:
            self.particles.update()

        # --- Time limit: costs a life and restarts the level clock
        self.ticks_elapsed += 1
        if self.elapsed_seconds() >= self.level.time_limit:
            logger.info("Time is up on %s", self.level.name)
            self.ticks_elapsed = 0
            self.lose_life()
            if self.state is not GameState.PLAYING:
                return

        # --- Level complete
        if self.score >= self.level.score_to_complete:
            self.state = GameState.LEVEL_COMPLETE
            logger.info("%s complete with score %d", self.level.name, self.score)

    def resolve_enemy_contacts(self) -> None:
        for enemy in self.level.alive_enemies():
            if not self.player.rect.colliderect(enemy.rect):
                continue

            if self.is_stomp(enemy):
                enemy.take_damage(1, from_above=True)
                self.player.bounce()
                self.score += settings.STOMP_SCORE
                self.play("stomp")
                continue

            if enemy.is_stunned:
                continue

            was_invulnerable = self.player.is_invulnerable
            self.player.take_damage(enemy.damage)
            if not was_invulnerable:
                self.play("hurt")

            if self.player.is_dead():
                self.lose_life()
                if self.state is GameState.GAME_OVER:
                    return

    def is_stomp(self, enemy: Enemy) -> bool:
        return self.player.is_attacking and self.player.rect.top < enemy.rect.top

    def resolve_pickups(self) -> None:
        for item in self.level.remaining_collectibles():
            if not self.player.rect.colliderect(item.rect):
                continue
            if not item.collect():
                continue
            self.score += item.value
            item.apply(self.player)
            if self.particles is not None:
                cx, cy = item.rect.center
                self.particles.create_explosion(cx, cy, settings.PICKUP_PARTICLES, settings.PARTICLE_COLOR)
            self.play("pickup")

    def play(self, name: str) -> None:
        if self.sounds is not None:
            self.sounds.play_sound(name)
