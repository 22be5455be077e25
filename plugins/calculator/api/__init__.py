"""API routes for the Calculator plugin."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from common.angle_mode import AngleMode, current_angle_mode, remember_angle_mode
from common.errors import ValidationAppError
from common.forms import get_int
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model, request_error

from ..core import EvaluationError, calculate

logger = get_logger("calculator")


class EvaluatePayload(SchemaModel):
    expression: str
    angle_mode: AngleMode | None = None
    variables: dict[str, float | int] | None = None


class AngleModePayload(SchemaModel):
    angle_mode: AngleMode


api_bp = Blueprint("calculator_api", __name__, url_prefix="/api/calculator")


def _display_chars() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("calculator", {}) or {}
    return get_int(settings, "display_chars", 12, minimum=1, maximum=64)


@api_bp.post("/evaluate")
def evaluate_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(EvaluatePayload, raw_payload)
    except ValidationError as exc:
        return fail(request_error(exc, prefix="calculator"))
    mode = current_angle_mode(payload.angle_mode)
    try:
        result = calculate(
            payload.expression,
            angle_mode=mode,
            variables=payload.variables or {},
            max_chars=_display_chars(),
        )
    except EvaluationError as exc:
        logger.info("rejected expression (%s): %s", exc.reason, exc)
        return fail(
            ValidationAppError(
                message=str(exc),
                code="calculator.invalid_expression",
                details={"reason": exc.reason},
            )
        )
    return ok(result)


@api_bp.get("/angle_mode")
def get_angle_mode() -> Response:
    return ok({"angle_mode": current_angle_mode().value})


@api_bp.post("/angle_mode")
def set_angle_mode() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(AngleModePayload, raw_payload)
    except ValidationError as exc:
        return fail(request_error(exc, prefix="calculator"))
    mode = remember_angle_mode(payload.angle_mode)
    return ok({"angle_mode": mode.value})


blueprints = [api_bp]


__all__ = ["blueprints", "evaluate_endpoint", "get_angle_mode", "set_angle_mode"]
