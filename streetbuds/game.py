# game.py
# The Game class owns the window, the main loop and the collaborators
# (sounds, particles, level registry). Gameplay rules live in GameSession;
# this file turns pygame events into session calls and draws the result.

from __future__ import annotations
from dataclasses import replace
import pygame

from . import settings
from .audio import SoundManager
from .controls import PAUSE_KEYS, START_KEYS, VOLUME_DOWN_KEYS, VOLUME_UP_KEYS, InputState
from .levels import LevelRegistry, default_levels
from .particles import ParticleSystem
from .session import GameSession, GameState


class Game:
    def __init__(self):
        pygame.init()

        self.window = pygame.display.set_mode((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
        pygame.display.set_caption(settings.TITLE)

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 24, bold=True)
        self.big_font = pygame.font.SysFont("arial", 48, bold=True)

        # Collaborators are built once here and passed down
        self.sounds = SoundManager()
        self.sounds.load_defaults()
        self.particles = ParticleSystem()
        self.registry = LevelRegistry(default_levels())
        self.session = GameSession(self.registry, self.sounds, self.particles)

        self.running = True
        self.frame = 0
        # SPACE both starts and jumps: hold jump off until it is released
        self.jump_latched = False

    # ------------------ Main loop ------------------
    def run(self) -> None:
        accumulator = 0.0
        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            accumulator += min(dt, settings.MAX_FRAME_TIME)

            self.handle_events()

            # Fixed ticks: physics constants are per tick, never per frame
            while accumulator >= settings.TICK_SECONDS:
                self.update()
                accumulator -= settings.TICK_SECONDS

            self.draw()
            self.frame += 1

        self.sounds.stop_background_music()
        pygame.quit()

    # ------------------ Events ------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type != pygame.KEYDOWN:
                continue

            state = self.session.state
            if event.key in PAUSE_KEYS:
                self.session.toggle_pause()

            elif event.key in VOLUME_DOWN_KEYS:
                self.sounds.set_volume(self.sounds.volume - settings.VOLUME_STEP)
            elif event.key in VOLUME_UP_KEYS:
                self.sounds.set_volume(self.sounds.volume + settings.VOLUME_STEP)

            elif event.key in START_KEYS:
                if state is GameState.MENU:
                    self.session.start()
                elif state is GameState.GAME_OVER:
                    self.session.restart()
                elif state is GameState.LEVEL_COMPLETE:
                    self.session.continue_to_next_level()
                else:
                    continue
                self.jump_latched = True

    # ------------------ Update ------------------
    def update(self) -> None:
        if self.session.state is not GameState.PLAYING:
            return
        inputs = InputState.from_keys(pygame.key.get_pressed())
        if self.jump_latched:
            if inputs.jump:
                inputs = replace(inputs, jump=False)
            else:
                self.jump_latched = False
        self.session.tick(inputs)

    # ------------------ Draw ------------------
    def draw(self) -> None:
        self.window.fill(settings.BACKGROUND_COLOR)
        state = self.session.state

        if state is GameState.MENU:
            self.draw_center_text(settings.TITLE, y=200, big=True)
            self.draw_center_text("Press SPACE to start", y=300)
            self.draw_center_text("A/D move, W jump, ESC pause, -/= volume", y=340)
            pygame.display.flip()
            return

        self.draw_world()
        self.draw_hud()

        if state is GameState.PAUSED:
            self.draw_overlay(alpha=150)
            self.draw_center_text("PAUSED", y=250, big=True)
            self.draw_center_text("Press ESC to continue", y=310)

        elif state is GameState.GAME_OVER:
            self.draw_overlay(alpha=200)
            self.draw_center_text("GAME OVER", y=250, big=True)
            self.draw_center_text(f"Final score: {self.session.score}", y=310)
            self.draw_center_text("Press SPACE to restart", y=350)

        elif state is GameState.LEVEL_COMPLETE:
            self.draw_overlay(alpha=200)
            self.draw_center_text("LEVEL COMPLETE!", y=250, big=True)
            self.draw_center_text(f"Score: {self.session.score}", y=310)
            self.draw_center_text("Press SPACE to continue", y=350)

        pygame.display.flip()

    def draw_world(self) -> None:
        # Level (platforms -> enemies -> pickups), then player, then particles
        self.session.level.draw(self.window)
        self.session.player.draw(self.window, tick=self.frame)
        self.particles.draw(self.window)

    # ------------------ UI helpers ------------------
    def draw_hud(self) -> None:
        lines = (
            f"Score: {self.session.score}",
            f"Lives: {self.session.lives}",
            f"Time: {self.session.remaining_time()}",
            f"Level: {self.registry.level_number}/{len(self.registry)}",
        )
        for i, line in enumerate(lines):
            txt = self.font.render(line, True, settings.TEXT_COLOR)
            self.window.blit(txt, (20, 20 + i * 30))

    def draw_center_text(self, text: str, y: int, big: bool = False) -> None:
        f = self.big_font if big else self.font
        surf = f.render(text, True, settings.TEXT_COLOR)
        rect = surf.get_rect(center=(settings.WINDOW_WIDTH // 2, y))
        self.window.blit(surf, rect)

    def draw_overlay(self, alpha: int) -> None:
        overlay = pygame.Surface((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.window.blit(overlay, (0, 0))
