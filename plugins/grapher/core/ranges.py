"""Domain and range resolution for plots."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Sequence

from common.forms import is_blank, try_parse_finite


class RangeError(ValueError):
    """Raised when plot bounds are missing, non-numeric or inverted."""


class DataExtentError(RangeError):
    """Raised when sampled values spread wider than a float interval can hold."""


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed interval with ``min < max``."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise RangeError("Interval bounds must be finite")
        if self.min >= self.max:
            raise RangeError("Interval minimum must be below its maximum")
        if not math.isfinite(self.max - self.min):
            raise RangeError("Interval is too wide to measure")

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True, slots=True)
class RangeResolution:
    range: Interval
    source: str  # "user" or "data"
    warning: str | None = None


INVALID_Y_RANGE_WARNING = "Invalid Y range values, using computed values."


def resolve_domain(min_text: Any, max_text: Any) -> Interval:
    """Parse the horizontal sampling interval from user input."""

    if is_blank(min_text) or is_blank(max_text):
        raise RangeError("Please input both X-min and X-max")
    minimum = try_parse_finite(min_text)
    maximum = try_parse_finite(max_text)
    if minimum is None or maximum is None or minimum >= maximum or not math.isfinite(maximum - minimum):
        raise RangeError("Invalid X range values")
    return Interval(minimum, maximum)


def _data_extent(ys: Sequence[float]) -> Interval:
    low = min(ys)
    high = max(ys)
    if low == high:
        # A flat line still needs a non-empty band to be drawn in.
        pad = max(1.0, abs(low) * 0.1)
        low = max(low - pad, -sys.float_info.max)
        high = min(high + pad, sys.float_info.max)
    if not math.isfinite(high - low):
        raise DataExtentError("Y values span too wide a range to plot")
    return Interval(low, high)


def resolve_range(user_min_text: Any, user_max_text: Any, points: Sequence[Any]) -> RangeResolution:
    """Pick the vertical display interval.

    Valid user bounds are used verbatim. Otherwise the interval spans the
    sampled ``y`` values, and if the user typed something unusable the
    resolution carries a warning instead of failing. ``points`` must not be
    empty; callers report "no plottable points" before getting here.
    """

    if not points:
        raise ValueError("resolve_range needs at least one sampled point")

    user_min = None if is_blank(user_min_text) else try_parse_finite(user_min_text)
    user_max = None if is_blank(user_max_text) else try_parse_finite(user_max_text)
    if user_min is not None and user_max is not None and user_min < user_max and math.isfinite(user_max - user_min):
        return RangeResolution(Interval(user_min, user_max), source="user")

    supplied = not (is_blank(user_min_text) and is_blank(user_max_text))
    warning = INVALID_Y_RANGE_WARNING if supplied else None
    return RangeResolution(_data_extent([point.y for point in points]), source="data", warning=warning)


__all__ = [
    "DataExtentError",
    "INVALID_Y_RANGE_WARNING",
    "Interval",
    "RangeError",
    "RangeResolution",
    "resolve_domain",
    "resolve_range",
]
