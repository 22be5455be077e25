"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

from flask import Flask, g, request

ROOT_LOGGER = "calc_suite"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return ``name`` under the package logger, configuring it on first use.

    Only the root ``calc_suite`` logger owns a handler; plugin loggers such as
    ``calc_suite.grapher`` propagate to it.
    """

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def _request_context() -> dict[str, Any]:
    return {
        "request_id": getattr(g, "request_id", "-"),
        "path": request.path,
        "method": request.method,
    }


def install_request_logging(app: Flask) -> None:
    logger = get_logger("http")

    @app.before_request
    def _begin_request() -> None:
        g.request_id = uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        context = _request_context()
        logger.info(
            "%s %s -> %s (%.2f ms) id=%s",
            context["method"],
            context["path"],
            response.status_code,
            duration_ms,
            context["request_id"],
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error("request error id=%s", _request_context()["request_id"], exc_info=exc)


__all__ = ["ROOT_LOGGER", "get_logger", "install_request_logging"]
