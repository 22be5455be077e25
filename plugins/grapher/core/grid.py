"""Tick and axis planning for both plot axes."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .mapper import Surface, scale_x, scale_y
from .ranges import Interval

DEFAULT_TICKS = 5


def ticks(interval: Interval, count: int = DEFAULT_TICKS) -> list[float]:
    """``count + 1`` evenly spaced values from ``interval.min`` to ``interval.max``."""

    if count < 1:
        raise ValueError("tick count must be at least 1")
    return np.linspace(interval.min, interval.max, count + 1).tolist()


def zero_axis_visible(interval: Interval) -> bool:
    return interval.contains(0.0)


@dataclass(frozen=True, slots=True)
class Tick:
    value: float
    position: float
    label: str


@dataclass(frozen=True, slots=True)
class AxisPlan:
    """Grid lines along one axis.

    ``orientation`` is ``"x"`` for ticks along the horizontal axis (vertical
    grid lines) and ``"y"`` for the vertical one. ``zero_position`` is the
    pixel coordinate of the value 0 along this axis when it is in view, which
    is where the perpendicular axis line is drawn.
    """

    orientation: str
    ticks: list[Tick] = field(default_factory=list)
    zero_visible: bool = False
    zero_position: float | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "orientation": self.orientation,
            "ticks": [
                {"value": tick.value, "position": tick.position, "label": tick.label}
                for tick in self.ticks
            ],
            "zero_visible": self.zero_visible,
            "zero_position": self.zero_position,
        }


def plan_axis(
    interval: Interval,
    surface: Surface,
    orientation: str,
    count: int = DEFAULT_TICKS,
) -> AxisPlan:
    if orientation == "x":
        position = lambda value: scale_x(value, interval, surface)  # noqa: E731
    elif orientation == "y":
        position = lambda value: scale_y(value, interval, surface)  # noqa: E731
    else:
        raise ValueError("orientation must be 'x' or 'y'")
    planned = [Tick(value, position(value), f"{value:.2f}") for value in ticks(interval, count)]
    visible = zero_axis_visible(interval)
    return AxisPlan(
        orientation=orientation,
        ticks=planned,
        zero_visible=visible,
        zero_position=position(0.0) if visible else None,
    )


__all__ = [
    "DEFAULT_TICKS",
    "AxisPlan",
    "Tick",
    "plan_axis",
    "ticks",
    "zero_axis_visible",
]
