"""Exports for the function grapher core."""

from .grid import DEFAULT_TICKS, AxisPlan, Tick, plan_axis, ticks, zero_axis_visible
from .mapper import DEFAULT_SURFACE, Surface, build_path, map_point, map_points, scale_x, scale_y
from .plot import EmptyPlotError, GraphState, PlotResult, plot_function
from .ranges import (
    INVALID_Y_RANGE_WARNING,
    DataExtentError,
    Interval,
    RangeError,
    RangeResolution,
    resolve_domain,
    resolve_range,
)
from .sampler import DEFAULT_STEPS, MAX_STEPS, DataPoint, SampleResult, abscissas, sample, sample_results

__all__ = [
    "DEFAULT_STEPS",
    "DEFAULT_SURFACE",
    "DEFAULT_TICKS",
    "INVALID_Y_RANGE_WARNING",
    "MAX_STEPS",
    "AxisPlan",
    "DataExtentError",
    "DataPoint",
    "EmptyPlotError",
    "GraphState",
    "Interval",
    "PlotResult",
    "RangeError",
    "RangeResolution",
    "SampleResult",
    "Surface",
    "Tick",
    "abscissas",
    "build_path",
    "map_point",
    "map_points",
    "plan_axis",
    "plot_function",
    "resolve_domain",
    "resolve_range",
    "sample",
    "sample_results",
    "scale_x",
    "scale_y",
    "ticks",
    "zero_axis_visible",
]
