"""Keyboard commands that move and scale the visible domain."""

from __future__ import annotations

from enum import IntEnum

from quackplot.graph_info import GraphInfo
from quackplot.plot import Plot

ZOOM_STEP = 0.8
PAN_STEP = 1.0


class Command(IntEnum):
    """Commands sent from the window to the system each frame."""

    NONE = 0
    TOGGLE_INPUT = 2
    PAN_LEFT = 4
    SUBMIT = 5
    PAN_RIGHT = 6
    ZOOM_IN = 8
    ZOOM_OUT = 9


class System:
    """Recalculates the domain in response to commands and refreshes the plot."""

    def __init__(self, info: GraphInfo | None = None) -> None:
        self.plot = Plot(info)
        self._actions = {
            Command.PAN_LEFT: self.pan_left,
            Command.PAN_RIGHT: self.pan_right,
            Command.ZOOM_IN: self.zoom_in,
            Command.ZOOM_OUT: self.zoom_out,
        }

    def zoom_in(self, info: GraphInfo) -> None:
        """Shrink both ranges by the zoom step on every side."""
        info.set_x(info.x_min + ZOOM_STEP, info.x_max - ZOOM_STEP)
        info.set_y(info.y_min + ZOOM_STEP, info.y_max - ZOOM_STEP)

    def zoom_out(self, info: GraphInfo) -> None:
        """Grow both ranges by the zoom step on every side."""
        info.set_x(info.x_min - ZOOM_STEP, info.x_max + ZOOM_STEP)
        info.set_y(info.y_min - ZOOM_STEP, info.y_max + ZOOM_STEP)

    def pan_left(self, info: GraphInfo) -> None:
        """Shift the horizontal range one unit left."""
        info.set_x(info.x_min - PAN_STEP, info.x_max - PAN_STEP)

    def pan_right(self, info: GraphInfo) -> None:
        """Shift the horizontal range one unit right."""
        info.set_x(info.x_min + PAN_STEP, info.x_max + PAN_STEP)

    def step(self, command: int, info: GraphInfo) -> None:
        """Apply ``command`` to ``info``, then hand it to the plot, clearing old points."""
        action = self._actions.get(command)
        if action is not None:
            action(info)
        self.plot.set_info(info)