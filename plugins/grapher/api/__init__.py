"""API routes for the Function Grapher plugin."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.angle_mode import AngleMode, current_angle_mode
from common.errors import UnprocessableAppError, ValidationAppError
from common.forms import get_int
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model, request_error
from plugins.calculator.core import EvaluationError

from ..core import (
    DEFAULT_STEPS,
    DEFAULT_SURFACE,
    DEFAULT_TICKS,
    MAX_STEPS,
    DataExtentError,
    EmptyPlotError,
    RangeError,
    Surface,
    plot_function,
)

Bound = float | int | str | None


class SurfacePayload(SchemaModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    margin: float = Field(ge=0)


class PlotPayload(SchemaModel):
    expression: str
    x_min: Bound = None
    x_max: Bound = None
    y_min: Bound = None
    y_max: Bound = None
    angle_mode: AngleMode | None = None
    steps: int | None = Field(default=None, ge=1, le=MAX_STEPS)
    surface: SurfacePayload | None = None


api_bp = Blueprint("grapher_api", __name__, url_prefix="/api/grapher")


def _settings() -> Mapping[str, Any]:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("grapher", {}) or {}


def _configured_surface(settings: Mapping[str, Any]) -> Surface:
    raw = settings.get("surface")
    if not isinstance(raw, Mapping):
        return DEFAULT_SURFACE
    try:
        return Surface(
            width=float(raw.get("width", DEFAULT_SURFACE.width)),
            height=float(raw.get("height", DEFAULT_SURFACE.height)),
            margin=float(raw.get("margin", DEFAULT_SURFACE.margin)),
        )
    except (TypeError, ValueError):
        return DEFAULT_SURFACE


@api_bp.post("/plot")
def plot() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(PlotPayload, raw_payload)
    except ValidationError as exc:
        return fail(request_error(exc, prefix="grapher"))

    settings = _settings()
    steps = payload.steps or get_int(settings, "steps", DEFAULT_STEPS, minimum=1, maximum=MAX_STEPS)
    tick_count = get_int(settings, "tick_count", DEFAULT_TICKS, minimum=1, maximum=50)
    if payload.surface is not None:
        try:
            surface = Surface(**payload.surface.model_dump())
        except ValueError as exc:
            return fail(ValidationAppError(message=str(exc), code="grapher.invalid_surface"))
    else:
        surface = _configured_surface(settings)

    try:
        result = plot_function(
            payload.expression,
            payload.x_min,
            payload.x_max,
            payload.y_min,
            payload.y_max,
            current_angle_mode(payload.angle_mode),
            steps=steps,
            surface=surface,
            tick_count=tick_count,
        )
    except EvaluationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="grapher.invalid_expression",
                details={"reason": exc.reason},
            )
        )
    except DataExtentError as exc:
        return fail(UnprocessableAppError(message=str(exc), code="grapher.invalid_range"))
    except RangeError as exc:
        return fail(ValidationAppError(message=str(exc), code="grapher.invalid_domain"))
    except EmptyPlotError as exc:
        return fail(UnprocessableAppError(message=str(exc), code="grapher.no_points"))

    return ok(result.to_dict(), warnings=[result.warning] if result.warning else None)


blueprints = [api_bp]


__all__ = ["blueprints", "plot"]
