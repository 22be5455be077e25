"""Unit converter API with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from common.errors import NotFoundAppError, ValidationAppError
from common.forms import get_int
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model, request_error

from ..core import (
    BadInputError,
    InvalidUnitError,
    UnknownCategoryError,
    convert_for_display,
    list_categories,
    list_units,
)


class ConvertPayload(SchemaModel):
    category: str
    from_unit: str
    to_unit: str
    value: float | int | str
    decimals: int | None = None


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _default_decimals() -> int:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {}) or {}
    return get_int(settings, "decimals", 2, minimum=0, maximum=12)


@api_bp.get("/categories")
def categories() -> Response:
    payload = {category: list_units(category) for category in list_categories()}
    return ok({"categories": list(payload.keys()), "units": payload})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except UnknownCategoryError as exc:
        return fail(NotFoundAppError(message=str(exc), code="unit.invalid_category"))
    return ok({"category": category, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return fail(request_error(exc, prefix="unit"))
    decimals = payload.decimals if payload.decimals is not None else _default_decimals()
    if decimals < 0 or decimals > 12:
        return fail(ValidationAppError(message="decimals must be between 0 and 12", code="unit.invalid_request"))
    try:
        result = convert_for_display(
            payload.category,
            payload.from_unit,
            payload.to_unit,
            payload.value,
            decimals=decimals,
        )
    except UnknownCategoryError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_category"))
    except InvalidUnitError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_unit"))
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_value"))
    return ok(result)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
]
