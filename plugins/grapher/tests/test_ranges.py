import sys

import pytest

from plugins.grapher.core import (
    INVALID_Y_RANGE_WARNING,
    DataExtentError,
    DataPoint,
    Interval,
    RangeError,
    resolve_domain,
    resolve_range,
)


def _points(*ys):
    return [DataPoint(float(i), float(y)) for i, y in enumerate(ys)]


def test_resolve_domain_parses_bounds():
    assert resolve_domain("-2", "2.5") == Interval(-2.0, 2.5)
    assert resolve_domain(-1, 1) == Interval(-1.0, 1.0)


@pytest.mark.parametrize(
    "low, high",
    [("3", "3"), ("5", "1"), ("a", "1"), ("0", "x"), ("", "1"), ("1", "  "), (None, "1"), ("nan", "1"), ("0", "inf")],
)
def test_resolve_domain_rejects_bad_bounds(low, high):
    with pytest.raises(RangeError):
        resolve_domain(low, high)


def test_resolve_range_uses_valid_user_bounds_verbatim():
    resolution = resolve_range("-10", "10", _points(1, 2, 3))
    assert resolution.range == Interval(-10.0, 10.0)
    assert resolution.source == "user"
    assert resolution.warning is None


def test_resolve_range_blank_bounds_use_data_without_warning():
    resolution = resolve_range("", None, _points(4, -1, 2))
    assert resolution.range == Interval(-1.0, 4.0)
    assert resolution.source == "data"
    assert resolution.warning is None


@pytest.mark.parametrize("low, high", [("5", "1"), ("abc", "2"), ("1", ""), ("2", "2")])
def test_resolve_range_invalid_bounds_warn_but_proceed(low, high):
    resolution = resolve_range(low, high, _points(0, 9))
    assert resolution.range == Interval(0.0, 9.0)
    assert resolution.warning == INVALID_Y_RANGE_WARNING


def test_resolve_range_widens_flat_data():
    resolution = resolve_range(None, None, _points(3, 3, 3))
    assert resolution.range == Interval(2.0, 4.0)
    resolution = resolve_range(None, None, _points(50, 50))
    assert resolution.range == Interval(45.0, 55.0)


def test_resolve_range_requires_points():
    with pytest.raises(ValueError):
        resolve_range("0", "1", [])


def test_interval_rejects_degenerate_bounds():
    with pytest.raises(RangeError):
        Interval(1.0, 1.0)
    assert Interval(-5, 5).span == 10


def test_resolve_domain_rejects_span_that_overflows():
    with pytest.raises(RangeError, match="Invalid X range values"):
        resolve_domain("-1e308", "1e308")
    with pytest.raises(RangeError):
        Interval(-1e308, 1e308)


def test_resolve_range_overflowing_user_bounds_warn_but_proceed():
    resolution = resolve_range("-1e308", "1e308", _points(0, 9))
    assert resolution.range == Interval(0.0, 9.0)
    assert resolution.warning == INVALID_Y_RANGE_WARNING


def test_flat_data_near_float_maximum_stays_finite():
    resolution = resolve_range(None, None, _points(1.7e308, 1.7e308))
    assert resolution.range.max == sys.float_info.max
    assert resolution.range.min == pytest.approx(1.53e308)
    resolution = resolve_range(None, None, _points(-1.7e308))
    assert resolution.range.min == -sys.float_info.max
    assert resolution.range.max == pytest.approx(-1.53e308)


def test_data_spread_beyond_float_range_is_reported():
    with pytest.raises(DataExtentError):
        resolve_range(None, None, _points(-1e308, 1e308))
