"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from flask import Response, jsonify

from .errors import AppError


def ok(data: Any, *, status: int = 200, warnings: Iterable[str] | None = None) -> Response:
    """Return a success envelope.

    Non-fatal problems the caller recovered from (for example an ignored
    y-range) travel alongside the data under ``warnings``.
    """

    payload: dict[str, Any] = {"success": True, "data": data}
    collected = [str(item) for item in warnings or () if item]
    if collected:
        payload["warnings"] = collected
    response = jsonify(payload)
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        body = error.to_dict()
        code = status or error.status_code
    else:
        body = dict(error)
        code = status or 400
    response = jsonify({"success": False, "error": body})
    response.status_code = code
    return response


__all__ = ["ok", "fail"]
