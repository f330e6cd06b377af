"""Sampling of the current equation into screen coordinates."""

from __future__ import annotations

from typing import Iterator

from quackplot.constants import SCREEN_HEIGHT, WORK_PANEL
from quackplot.graph_info import GraphInfo
from quackplot.rpn import evaluate
from quackplot.shunting_yard import to_postfix

Point = tuple[float, float]


def _sample_xs(info: GraphInfo) -> Iterator[float]:
    if info.num_points < 1:
        raise ValueError("number of points must be at least 1")
    if info.x_min > info.x_max:
        return
    if info.num_points == 1:
        yield info.x_min
        return
    step = (info.x_max - info.x_min) / (info.num_points - 1)
    for k in range(info.num_points):
        yield info.x_min + k * step


class Plot:
    """Turns the equation held by a GraphInfo into points on the screen."""

    def __init__(self, info: GraphInfo | None = None) -> None:
        self.info = info
        self.points: list[Point] = []

    def set_info(self, info: GraphInfo) -> None:
        """Use ``info`` from now on and drop the points computed so far."""
        self.info = info
        self.points.clear()

    def _require_info(self) -> GraphInfo:
        if self.info is None:
            raise ValueError("plot has no graph info")
        return self.info

    def translate(self, point: Point) -> Point:
        """Map a point in graph coordinates to screen pixels."""
        info = self._require_info()
        x, y = point
        x_scale = WORK_PANEL / (info.x_max - info.x_min)
        y_scale = SCREEN_HEIGHT / (info.y_max - info.y_min)
        # One pixel is taken off both axes to centre the dot drawn there.
        return x_scale * (x - info.x_min) - 1.0, SCREEN_HEIGHT / 2 - y_scale * y - 1.0

    def __call__(self) -> list[Point]:
        """Sample the equation across the domain and return all points held.

        New points are added to those already held until ``set_info`` clears them.
        Samples whose evaluation fails are skipped.
        """
        info = self._require_info()
        if info.expression:
            postfix = to_postfix(info.expression)
            for x in _sample_xs(info):
                try:
                    y = evaluate(postfix, x)
                except ValueError:
                    continue
                self.points.append(self.translate((x, y)))
        return list(self.points)