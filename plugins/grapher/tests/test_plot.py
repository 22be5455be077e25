import pytest

from common.angle_mode import AngleMode
from plugins.calculator.core import EvaluationError
from plugins.grapher.core import (
    INVALID_Y_RANGE_WARNING,
    EmptyPlotError,
    GraphState,
    Interval,
    RangeError,
    Surface,
    plot_function,
)


def test_plot_function_runs_full_pipeline():
    result = plot_function("x^2", "-2", "2", angle_mode=AngleMode.RADIANS, steps=4)
    assert result.domain == Interval(-2.0, 2.0)
    assert result.range == Interval(0.0, 4.0)
    assert result.range_source == "data"
    assert [point.y for point in result.points] == [4.0, 1.0, 0.0, 1.0, 4.0]
    assert len(result.pixels) == 5
    assert result.path.startswith("M 30.00 30.00 L")
    assert len(result.x_axis.ticks) == 6
    assert result.x_axis.zero_visible is True
    assert result.y_axis.zero_visible is True
    assert result.warning is None
    assert result.skipped == {}


def test_plot_function_reports_skipped_samples():
    result = plot_function("1/x", "-1", "1", angle_mode="radian", steps=2)
    assert len(result.points) == 2
    assert result.skipped == {"domain_error": 1}


def test_plot_function_uses_user_range_or_warns():
    user = plot_function("x", "0", "1", "-5", "5", steps=10)
    assert user.range == Interval(-5.0, 5.0)
    assert user.range_source == "user"

    fallback = plot_function("x", "0", "1", "5", "-5", steps=10)
    assert fallback.range == Interval(0.0, 1.0)
    assert fallback.warning == INVALID_Y_RANGE_WARNING


def test_plot_function_errors_are_distinct():
    with pytest.raises(EvaluationError):
        plot_function("   ", "0", "1")
    with pytest.raises(EvaluationError):
        plot_function("x +", "0", "1")
    with pytest.raises(RangeError):
        plot_function("x", "", "1")
    with pytest.raises(RangeError):
        plot_function("x", "2", "1")
    with pytest.raises(EmptyPlotError):
        plot_function("sqrt(x)", "-4", "-1")


def test_plot_to_dict_is_json_ready():
    result = plot_function("sin(x)", "0", "360", angle_mode=AngleMode.DEGREES, surface=Surface(400, 200, 20))
    payload = result.to_dict()
    assert payload["angle_mode"] == "degree"
    assert len(payload["points"]) == 201
    assert payload["range"]["max"] == pytest.approx(1.0)
    assert payload["surface"] == {"width": 400, "height": 200, "margin": 20}
    assert payload["x_axis"]["ticks"][0]["label"] == "0.00"


def test_graph_state_keeps_last_good_plot():
    state = GraphState()
    assert state.is_empty
    first = state.plot("x^2", "-2", "2", steps=4)
    assert state.current is first

    with pytest.raises(EmptyPlotError):
        state.plot("ln(x)", "-2", "-1")
    with pytest.raises(RangeError):
        state.plot("x", "b", "a")
    assert state.current is first

    second = state.plot("x^3", "-1", "1")
    assert state.current is second

    state.clear()
    assert state.is_empty
