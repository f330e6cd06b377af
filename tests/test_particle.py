import random

import pygame
import pytest

from quackplot.constants import SCREEN_HEIGHT, WORK_PANEL
from quackplot.particle import Particle


def test_placed_particle_defaults():
    p = Particle((30.0, 40.0))
    assert p.pos == (30.0, 40.0)
    assert p.radius == 10.0
    assert p.color == (200, 0, 0)
    assert p.velocity == (0.0, 0.0)


@pytest.mark.parametrize("seed", range(20))
def test_random_particle_ranges(seed):
    p = Particle(rng=random.Random(seed))
    assert all(50 <= c <= 100 for c in p.pos)
    assert 8 <= p.radius <= 25
    assert all(-10 <= v <= 10 for v in p.velocity)
    assert all(0 <= c <= 255 for c in p.color)


def test_same_seed_same_particle():
    a = Particle(rng=random.Random(7))
    b = Particle(rng=random.Random(7))
    assert (a.pos, a.radius, a.velocity, a.color) == (b.pos, b.radius, b.velocity, b.color)


def test_step_inside_does_not_move():
    p = Particle((200.0, 200.0))
    p.velocity = (3.0, 4.0)
    p.step(0)
    assert p.pos == (200.0, 200.0)
    assert p.velocity == (3.0, 4.0)


def test_step_bounces_off_right_edge():
    p = Particle((WORK_PANEL - 5, 100.0))
    p.velocity = (3.0, 0.0)
    p.step(0)
    assert p.velocity == (-3.0, 0.0)
    assert p.pos == (WORK_PANEL - 5 - 3.0, 100.0)


def test_step_bounces_off_top_and_bottom():
    top = Particle((100.0, 0.0))
    top.velocity = (0.0, -2.0)
    top.step(0)
    assert top.velocity == (0.0, 2.0)
    assert top.pos == (100.0, 2.0)

    bottom = Particle((100.0, float(SCREEN_HEIGHT)))
    bottom.velocity = (0.0, 2.0)
    bottom.step(0)
    assert bottom.velocity == (0.0, -2.0)
    assert bottom.pos == (100.0, SCREEN_HEIGHT - 2.0)


def test_draw_fills_circle_with_color():
    p = Particle((20.0, 30.0))
    surface = pygame.Surface((200, 200))
    p.draw(surface)
    centre = (int(20 + p.radius), int(30 + p.radius))
    assert surface.get_at(centre)[:3] == (200, 0, 0)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)