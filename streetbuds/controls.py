# controls.py
# Semantic input snapshot. Gameplay code only ever sees these named flags,
# never raw key codes.

from __future__ import annotations
from dataclasses import dataclass
import pygame

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
JUMP_KEYS = (pygame.K_w, pygame.K_UP, pygame.K_SPACE)

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
PAUSE_KEYS = (pygame.K_ESCAPE, pygame.K_p)
VOLUME_DOWN_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)
VOLUME_UP_KEYS = (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS)


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump: bool = False

    @classmethod
    def from_keys(cls, keys) -> InputState:
        """Build a snapshot from a pressed-keys lookup (pygame.key.get_pressed())."""
        def held(codes: tuple[int, ...]) -> bool:
            return any(keys[code] for code in codes)

        return cls(left=held(LEFT_KEYS), right=held(RIGHT_KEYS), jump=held(JUMP_KEYS))


NO_INPUT = InputState()
