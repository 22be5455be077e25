"""Fixed-step sampling of y = f(x) over a domain."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from common.angle_mode import AngleMode
from plugins.calculator.core import CompiledExpression, EvaluationError, compile_expression

from .ranges import Interval

DEFAULT_STEPS = 200
MAX_STEPS = 5000


@dataclass(frozen=True, slots=True)
class DataPoint:
    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Outcome of evaluating the expression at one abscissa.

    Exactly one of ``y`` and ``reason`` is set; ``reason`` is
    ``"domain_error"`` (the function is undefined there) or ``"non_finite"``.
    """

    x: float
    y: float | None = None
    reason: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def point(self) -> DataPoint:
        if self.y is None:
            raise ValueError(f"no value at x={self.x}: {self.reason}")
        return DataPoint(self.x, self.y)


def abscissas(domain: Interval, steps: int = DEFAULT_STEPS) -> list[float]:
    """``steps + 1`` evenly spaced x values including both endpoints."""

    if steps < 1 or steps > MAX_STEPS:
        raise ValueError(f"steps must be between 1 and {MAX_STEPS}")
    return np.linspace(domain.min, domain.max, steps + 1).tolist()


def sample_results(
    compiled: CompiledExpression,
    domain: Interval,
    steps: int = DEFAULT_STEPS,
) -> list[SampleResult]:
    """Evaluate ``compiled`` at every abscissa and classify each outcome.

    Pointwise failures are recorded and sampling continues; any other
    :class:`EvaluationError` belongs to the expression itself and propagates.
    """

    results: list[SampleResult] = []
    for x in abscissas(domain, steps):
        try:
            y = compiled(x)
        except EvaluationError as exc:
            if not exc.is_pointwise:
                raise
            reason = "non_finite" if exc.reason == "non_finite" else "domain_error"
            results.append(SampleResult(x=x, reason=reason, message=str(exc)))
            continue
        results.append(SampleResult(x=x, y=y))
    return results


def sample(
    expression: str,
    domain: Interval,
    angle_mode: AngleMode | str,
    steps: int = DEFAULT_STEPS,
) -> list[DataPoint]:
    """Return the plottable points of ``expression`` over ``domain``, by increasing x."""

    compiled = compile_expression(expression, angle_mode, variables=("x",))
    return [result.point() for result in sample_results(compiled, domain, steps) if result.ok]


__all__ = [
    "DEFAULT_STEPS",
    "MAX_STEPS",
    "DataPoint",
    "SampleResult",
    "abscissas",
    "sample",
    "sample_results",
]
