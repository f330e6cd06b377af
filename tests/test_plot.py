import pytest

from quackplot.constants import SCREEN_HEIGHT, WORK_PANEL
from quackplot.graph_info import GraphInfo
from quackplot.plot import Plot


@pytest.fixture
def info():
    return GraphInfo()


def test_translate_left_edge(info):
    plot = Plot(info)
    assert plot.translate((info.x_min, 0.0))[0] == -1.0


def test_translate_right_edge(info):
    plot = Plot(info)
    assert plot.translate((info.x_max, 0.0))[0] == pytest.approx(WORK_PANEL - 1.0)


def test_translate_zero_height_is_screen_middle(info):
    plot = Plot(info)
    assert plot.translate((0.0, 0.0))[1] == SCREEN_HEIGHT / 2 - 1.0


def test_translate_top_of_symmetric_range(info):
    plot = Plot(info)
    assert plot.translate((0.0, info.y_max))[1] == pytest.approx(-1.0)


def test_no_expression_gives_no_points(info):
    assert Plot(info)() == []


def test_line_gives_one_point_per_sample(info):
    info.set_equation("x")
    points = Plot(info)()
    assert len(points) == info.num_points


def test_first_and_last_points_are_domain_ends(info):
    info.set_equation("x")
    plot = Plot(info)
    points = plot()
    assert points[0] == pytest.approx(plot.translate((info.x_min, info.x_min)))
    assert points[-1] == pytest.approx(plot.translate((info.x_max, info.x_max)))


def test_rising_line_goes_right_and_up(info):
    info.set_equation("x")
    points = Plot(info)()
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert xs == sorted(xs)
    assert ys == sorted(ys, reverse=True)


def test_points_accumulate_until_set_info(info):
    info.set_equation("x")
    plot = Plot(info)
    plot()
    assert len(plot()) == 2 * info.num_points
    plot.set_info(info)
    assert plot.points == []
    assert len(plot()) == info.num_points


def test_malformed_expression_points_are_skipped(info):
    info.set_equation("+")
    assert Plot(info)() == []


def test_reversed_domain_gives_no_points(info):
    info.set_equation("x")
    info.set_x(1.0, -1.0)
    assert Plot(info)() == []


def test_without_info_raises():
    with pytest.raises(ValueError):
        Plot()()