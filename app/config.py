"""Configuration classes for the Flask application."""

from __future__ import annotations

import os
import secrets


def _load_secret() -> str:
    """Return the Flask secret key for the current process."""

    secret = os.environ.get("CALC_SUITE_SECRET")
    if secret:
        return secret
    # Generate an unpredictable per-process key for local development.
    return secrets.token_urlsafe(64)


class BaseConfig:
    SECRET_KEY = _load_secret()
    MAX_CONTENT_LENGTH = 64 * 1024  # JSON payloads only
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Strict"
    RESPONSE_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
        "Referrer-Policy": "no-referrer",
    }


class TestingConfig(BaseConfig):
    TESTING = True


__all__ = ["BaseConfig", "TestingConfig"]
