"""A bouncing ball kept inside the work panel."""

from __future__ import annotations

import random

import pygame

from quackplot.constants import SCREEN_HEIGHT, WORK_PANEL

Color = tuple[int, int, int]


class Particle:
    """A coloured ball with a position (its top-left corner) and a velocity."""

    def __init__(
        self,
        pos: tuple[float, float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if pos is not None:
            self.pos = (float(pos[0]), float(pos[1]))
            self.radius = 10.0
            self.velocity = (0.0, 0.0)
            self.color: Color = (200, 0, 0)
            return
        rng = rng if rng is not None else random.Random()
        self.pos = (float(rng.randint(50, 100)), float(rng.randint(50, 100)))
        self.radius = float(rng.randint(8, 25))
        self.velocity = (float(rng.randint(-10, 10)), float(rng.randint(-10, 10)))
        self.color = (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

    def step(self, command: int = 0) -> None:
        """Reverse and apply the velocity on any axis where the ball touches an edge."""
        x, y = self.pos
        vx, vy = self.velocity
        diameter = 2 * self.radius
        if x + diameter >= WORK_PANEL:
            vx = -vx
            x += vx
        if x <= 0:
            vx = -vx
            x += vx
        if y + diameter >= SCREEN_HEIGHT:
            vy = -vy
            y += vy
        if y <= 0:
            vy = -vy
            y += vy
        self.pos = (x, y)
        self.velocity = (vx, vy)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball as a filled circle."""
        x, y = self.pos
        pygame.draw.circle(surface, self.color, (x + self.radius, y + self.radius), self.radius)