import pytest

from plugins.grapher.core import (
    DataPoint,
    Interval,
    Surface,
    build_path,
    map_point,
    plan_axis,
    ticks,
    zero_axis_visible,
)

SURFACE = Surface(width=335, height=300, margin=30)
DOMAIN = Interval(-2, 2)
RANGE = Interval(0, 4)


def test_corners_land_on_margin_inset():
    assert map_point(DataPoint(DOMAIN.min, RANGE.min), DOMAIN, RANGE, SURFACE) == (30, 270)
    assert map_point(DataPoint(DOMAIN.max, RANGE.max), DOMAIN, RANGE, SURFACE) == (305, 30)


def test_vertical_axis_is_inverted():
    _, low = map_point(DataPoint(0, 1), DOMAIN, RANGE, SURFACE)
    _, high = map_point(DataPoint(0, 3), DOMAIN, RANGE, SURFACE)
    assert high < low


def test_midpoint_maps_to_centre_of_plot_area():
    px, py = map_point(DataPoint(0, 2), DOMAIN, RANGE, SURFACE)
    assert px == pytest.approx(167.5)
    assert py == pytest.approx(150)


def test_build_path_joins_points_in_order():
    assert build_path([(30, 270), (305.5, 30.25)]) == "M 30.00 270.00 L 305.50 30.25"
    assert build_path([]) == ""


def test_surface_must_fit_margins():
    with pytest.raises(ValueError):
        Surface(width=50, height=300, margin=30)


def test_ticks_are_evenly_spaced_and_inclusive():
    assert ticks(Interval(0, 10)) == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]
    assert ticks(Interval(-1, 1), count=4) == [-1.0, -0.5, 0.0, 0.5, 1.0]


def test_zero_axis_visibility():
    assert zero_axis_visible(Interval(-5, 5)) is True
    assert zero_axis_visible(Interval(1, 5)) is False
    assert zero_axis_visible(Interval(0, 5)) is True
    assert zero_axis_visible(Interval(-5, 0)) is True


def test_plan_axis_positions_and_labels():
    plan = plan_axis(DOMAIN, SURFACE, "x", count=4)
    assert [tick.value for tick in plan.ticks] == [-2.0, -1.0, 0.0, 1.0, 2.0]
    assert plan.ticks[0].position == 30
    assert plan.ticks[-1].position == 305
    assert plan.ticks[1].label == "-1.00"
    assert plan.zero_visible is True
    assert plan.zero_position == pytest.approx(167.5)

    y_plan = plan_axis(Interval(1, 5), SURFACE, "y")
    assert y_plan.zero_visible is False
    assert y_plan.zero_position is None
    assert y_plan.ticks[0].position == 270
    assert y_plan.ticks[-1].position == 30
