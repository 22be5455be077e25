"""Affine mapping from data space onto a drawing surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .ranges import Interval
from .sampler import DataPoint


@dataclass(frozen=True, slots=True)
class Surface:
    """Pixel size of the drawing area and the inset kept free on every side."""

    width: float
    height: float
    margin: float

    def __post_init__(self) -> None:
        if self.margin < 0:
            raise ValueError("margin must be non-negative")
        if self.width <= 2 * self.margin or self.height <= 2 * self.margin:
            raise ValueError("surface must be larger than twice its margin")

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height, "margin": self.margin}


DEFAULT_SURFACE = Surface(width=335, height=300, margin=30)


def scale_x(x: float, domain: Interval, surface: Surface) -> float:
    return surface.margin + (x - domain.min) / (domain.max - domain.min) * (surface.width - 2 * surface.margin)


def scale_y(y: float, range_: Interval, surface: Surface) -> float:
    # Pixel rows grow downwards, so larger y sits nearer the top.
    return surface.height - (
        surface.margin + (y - range_.min) / (range_.max - range_.min) * (surface.height - 2 * surface.margin)
    )


def map_point(point: DataPoint, domain: Interval, range_: Interval, surface: Surface) -> tuple[float, float]:
    """Pixel coordinates of ``point``."""

    return scale_x(point.x, domain, surface), scale_y(point.y, range_, surface)


def map_points(
    points: Iterable[DataPoint],
    domain: Interval,
    range_: Interval,
    surface: Surface,
) -> list[tuple[float, float]]:
    return [map_point(point, domain, range_, surface) for point in points]


def build_path(pixels: Iterable[tuple[float, float]], *, precision: int = 2) -> str:
    """SVG path data joining ``pixels`` in order (``M x y L x y ...``)."""

    parts = []
    for index, (px, py) in enumerate(pixels):
        command = "M" if index == 0 else "L"
        parts.append(f"{command} {px:.{precision}f} {py:.{precision}f}")
    return " ".join(parts)


__all__ = [
    "DEFAULT_SURFACE",
    "Surface",
    "build_path",
    "map_point",
    "map_points",
    "scale_x",
    "scale_y",
]
