"""Angle convention shared by the calculator and the grapher."""

from __future__ import annotations

from enum import Enum

from flask import current_app, session

SESSION_KEY = "angle_mode"


class AngleMode(str, Enum):
    """How trigonometric arguments are interpreted."""

    DEGREES = "degree"
    RADIANS = "radian"

    @classmethod
    def parse(cls, value: "AngleMode | str | None", default: "AngleMode | None" = None) -> "AngleMode":
        if isinstance(value, cls):
            return value
        if value is None:
            if default is None:
                raise ValueError("angle mode is required")
            return default
        text = str(value).strip().lower()
        aliases = {
            "deg": cls.DEGREES,
            "degree": cls.DEGREES,
            "degrees": cls.DEGREES,
            "rad": cls.RADIANS,
            "radian": cls.RADIANS,
            "radians": cls.RADIANS,
        }
        try:
            return aliases[text]
        except KeyError as exc:
            raise ValueError("angle mode must be 'degree' or 'radian'") from exc


def default_angle_mode() -> AngleMode:
    """Return the site default from ``config.yml`` (degrees when unset)."""

    site = current_app.config.get("SITE_SETTINGS", {}) or {}
    try:
        return AngleMode.parse(site.get("default_angle_mode"), AngleMode.DEGREES)
    except ValueError:
        return AngleMode.DEGREES


def current_angle_mode(explicit: AngleMode | str | None = None) -> AngleMode:
    """Resolve the angle mode for one request.

    An explicit value in the request wins; otherwise the last toggle stored in
    the user's session, otherwise the site default.
    """

    if explicit is not None:
        return AngleMode.parse(explicit)
    stored = session.get(SESSION_KEY)
    if stored is not None:
        try:
            return AngleMode.parse(stored)
        except ValueError:
            session.pop(SESSION_KEY, None)
    return default_angle_mode()


def remember_angle_mode(mode: AngleMode | str) -> AngleMode:
    """Store an explicit user toggle in the session."""

    resolved = AngleMode.parse(mode)
    session[SESSION_KEY] = resolved.value
    return resolved


__all__ = [
    "AngleMode",
    "current_angle_mode",
    "default_angle_mode",
    "remember_angle_mode",
]
