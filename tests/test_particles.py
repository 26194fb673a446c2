import random

import pygame

from streetbuds import settings
from streetbuds.particles import ParticleSystem


def test_explosion_spawns_requested_count():
    ps = ParticleSystem(rng=random.Random(7))
    ps.create_explosion(100, 100, 20, settings.PARTICLE_COLOR)
    assert len(ps) == 20


def test_particles_die_out():
    ps = ParticleSystem(rng=random.Random(7))
    ps.create_explosion(100, 100, 10, settings.PARTICLE_COLOR)
    for _ in range(int(settings.FPS * 1.5) + 1):
        ps.update()
    assert len(ps) == 0


def test_particles_fall_under_gravity():
    ps = ParticleSystem(rng=random.Random(7))
    ps.create_explosion(100, 100, 1, settings.PARTICLE_COLOR)
    p = ps.particles[0]
    vy = p.vel.y
    ps.update()
    assert p.vel.y > vy
    assert p.alpha < 255


def test_draw_and_clear():
    ps = ParticleSystem(rng=random.Random(7))
    ps.create_explosion(100, 100, 5, settings.PARTICLE_COLOR)
    ps.draw(pygame.Surface((200, 200)))
    ps.clear()
    assert len(ps) == 0
