"""Full plot pipeline: evaluate, sample, resolve range, map and plan the grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from common.angle_mode import AngleMode
from common.forms import is_blank
from common.logging import get_logger
from plugins.calculator.core import EvaluationError, compile_expression, strip_assignment_prefix

from .grid import DEFAULT_TICKS, AxisPlan, plan_axis
from .mapper import DEFAULT_SURFACE, Surface, build_path, map_points
from .ranges import Interval, resolve_domain, resolve_range
from .sampler import DEFAULT_STEPS, DataPoint, sample_results

logger = get_logger("grapher")


class EmptyPlotError(ValueError):
    """The expression is valid but has no finite value anywhere on the domain."""


@dataclass(frozen=True)
class PlotResult:
    expression: str
    angle_mode: AngleMode
    domain: Interval
    range: Interval
    range_source: str
    points: list[DataPoint]
    pixels: list[tuple[float, float]]
    path: str
    x_axis: AxisPlan
    y_axis: AxisPlan
    surface: Surface
    skipped: dict[str, int] = field(default_factory=dict)
    warning: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "expression": self.expression,
            "angle_mode": self.angle_mode.value,
            "domain": self.domain.to_dict(),
            "range": self.range.to_dict(),
            "range_source": self.range_source,
            "points": [point.to_dict() for point in self.points],
            "pixels": [[px, py] for px, py in self.pixels],
            "path": self.path,
            "x_axis": self.x_axis.to_dict(),
            "y_axis": self.y_axis.to_dict(),
            "surface": self.surface.to_dict(),
            "skipped": dict(self.skipped),
            "warning": self.warning,
        }


def plot_function(
    expression: str,
    x_min: Any,
    x_max: Any,
    y_min: Any = None,
    y_max: Any = None,
    angle_mode: AngleMode | str = AngleMode.DEGREES,
    *,
    steps: int = DEFAULT_STEPS,
    surface: Surface = DEFAULT_SURFACE,
    tick_count: int = DEFAULT_TICKS,
) -> PlotResult:
    """Run one "plot" action end to end.

    Raises :class:`EvaluationError` for a blank or malformed expression,
    :class:`~.ranges.RangeError` for a bad domain (:class:`~.ranges.DataExtentError`
    when the sampled values cannot be framed) and :class:`EmptyPlotError`
    when no sample is plottable. A bad y-range only produces ``warning``.
    """

    if not isinstance(expression, str) or is_blank(expression):
        raise EvaluationError("Please enter a function")
    domain = resolve_domain(x_min, x_max)
    mode = AngleMode.parse(angle_mode)
    compiled = compile_expression(expression, mode, variables=("x",))

    results = sample_results(compiled, domain, steps)
    points = [result.point() for result in results if result.ok]
    skipped: dict[str, int] = {}
    for result in results:
        if not result.ok:
            skipped[result.reason] = skipped.get(result.reason, 0) + 1
    if skipped:
        logger.debug("skipped %s of %s samples for %r: %s", sum(skipped.values()), len(results), expression, skipped)
    if not points:
        raise EmptyPlotError("No plottable points found")

    resolution = resolve_range(y_min, y_max, points)
    if resolution.warning:
        logger.info("%s (y_min=%r, y_max=%r)", resolution.warning, y_min, y_max)
    y_range = resolution.range

    pixels = map_points(points, domain, y_range, surface)
    return PlotResult(
        expression=strip_assignment_prefix(expression),
        angle_mode=mode,
        domain=domain,
        range=y_range,
        range_source=resolution.source,
        points=points,
        pixels=pixels,
        path=build_path(pixels),
        x_axis=plan_axis(domain, surface, "x", tick_count),
        y_axis=plan_axis(y_range, surface, "y", tick_count),
        surface=surface,
        skipped=skipped,
        warning=resolution.warning,
    )


class GraphState:
    """The plot currently on display.

    A successful :meth:`plot` replaces it wholesale, a failed one leaves it
    untouched, and :meth:`clear` drops it.
    """

    def __init__(self) -> None:
        self.current: PlotResult | None = None

    def plot(self, *args: Any, **kwargs: Any) -> PlotResult:
        result = plot_function(*args, **kwargs)
        self.current = result
        return result

    def clear(self) -> None:
        self.current = None

    @property
    def is_empty(self) -> bool:
        return self.current is None


__all__ = ["EmptyPlotError", "GraphState", "PlotResult", "plot_function"]
