import pytest

from quackplot.graph_info import GraphInfo
from quackplot.system import Command, System


def _ranges(info):
    return (info.x_min, info.x_max, info.y_min, info.y_max)


def test_pan_left_shifts_x_only():
    info = GraphInfo()
    x_min, x_max, y_min, y_max = _ranges(info)
    System(info).step(Command.PAN_LEFT, info)
    assert _ranges(info) == (x_min - 1, x_max - 1, y_min, y_max)


def test_pan_right_with_plain_int_command():
    info = GraphInfo()
    x_min, x_max, y_min, y_max = _ranges(info)
    System(info).step(6, info)
    assert _ranges(info) == (x_min + 1, x_max + 1, y_min, y_max)


def test_zoom_in_narrows_all_ranges():
    info = GraphInfo()
    before = _ranges(info)
    System(info).step(Command.ZOOM_IN, info)
    assert info.x_max - info.x_min == pytest.approx(before[1] - before[0] - 1.6)
    assert info.y_max - info.y_min == pytest.approx(before[3] - before[2] - 1.6)


def test_zoom_out_then_in_restores():
    info = GraphInfo()
    before = _ranges(info)
    system = System(info)
    system.zoom_out(info)
    system.zoom_in(info)
    assert _ranges(info) == pytest.approx(before)


def test_pan_left_then_right_restores():
    info = GraphInfo()
    before = _ranges(info)
    system = System(info)
    system.pan_left(info)
    system.pan_right(info)
    assert _ranges(info) == pytest.approx(before)


@pytest.mark.parametrize("command", [Command.NONE, Command.TOGGLE_INPUT, Command.SUBMIT, 7])
def test_other_commands_leave_ranges(command):
    info = GraphInfo()
    before = _ranges(info)
    System(info).step(command, info)
    assert _ranges(info) == before


def test_step_refreshes_plot():
    info = GraphInfo()
    info.set_equation("x")
    system = System(info)
    system.plot()
    assert len(system.plot.points) == info.num_points
    system.step(Command.NONE, info)
    assert system.plot.points == []
    assert system.plot.info is info


def test_step_gives_plot_info_when_built_without():
    info = GraphInfo()
    info.set_equation("x")
    system = System()
    system.step(Command.PAN_RIGHT, info)
    points = system.plot()
    assert points[0] == pytest.approx(system.plot.translate((info.x_min, info.x_min)))