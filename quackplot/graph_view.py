"""Drawing of the axes, the polar grid and the plotted points."""

from __future__ import annotations

import math

import pygame

from quackplot.constants import SCREEN_HEIGHT, WORK_PANEL
from quackplot.graph_info import GraphInfo
from quackplot.plot import Plot

AXIS_COLOR = (255, 255, 255)
POINT_COLOR = (0, 200, 0)
POINT_RADIUS = 1.0
RING_THICKNESS = 4
RING_RADII = (WORK_PANEL / 6, WORK_PANEL / 3, WORK_PANEL / 2)
RAY_LENGTH = 1500.0

# Each polar ray: horizontal offset of its start from the origin, start height and angle in degrees.
_RAYS = (
    (-WORK_PANEL / 2, 3.25 * SCREEN_HEIGHT / 4, -24.0),
    (-WORK_PANEL / 4, float(SCREEN_HEIGHT), -55.0),
    (WORK_PANEL / 4, float(SCREEN_HEIGHT), -125.0),
    (WORK_PANEL / 2, 3.25 * SCREEN_HEIGHT / 4, -156.0),
)


class GraphView:
    """Draws the graph held by a Plot onto a surface."""

    def __init__(self, plot: Plot | None = None) -> None:
        self.plot = plot if plot is not None else Plot()

    @property
    def info(self) -> GraphInfo | None:
        return self.plot.info

    def update(self, info: GraphInfo) -> None:
        """Take new graph information, dropping the points drawn before."""
        self.plot.set_info(info)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the axes, the polar grid when enabled, and the equation's points."""
        info = self.info
        if info is None:
            raise ValueError("graph view has no graph info")
        origin_x, _ = self.plot.translate((0.0, 0.0))
        centre_y = SCREEN_HEIGHT / 2

        pygame.draw.rect(surface, AXIS_COLOR, pygame.Rect(0, centre_y, WORK_PANEL, 1))
        pygame.draw.rect(surface, AXIS_COLOR, pygame.Rect(origin_x, 0, 1, SCREEN_HEIGHT))

        if info.polar:
            for radius in RING_RADII:
                # The ring's outline lies outside its radius.
                pygame.draw.circle(
                    surface, AXIS_COLOR, (origin_x, centre_y), radius + RING_THICKNESS, RING_THICKNESS
                )
            for offset, start_y, degrees in _RAYS:
                start = (origin_x + offset, start_y)
                angle = math.radians(degrees)
                end = (start[0] + RAY_LENGTH * math.cos(angle), start[1] + RAY_LENGTH * math.sin(angle))
                pygame.draw.line(surface, AXIS_COLOR, start, end)

        for x, y in self.plot():
            pygame.draw.circle(surface, POINT_COLOR, (x + POINT_RADIUS, y + POINT_RADIUS), POINT_RADIUS)