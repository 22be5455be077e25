"""Parsing helpers for free-text numeric fields."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from .validation import ValidationError

_MAX_NUMBER_CHARS = 64


def is_blank(raw: Any) -> bool:
    """Return ``True`` for ``None`` and whitespace-only strings."""

    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def parse_finite(raw: Any, *, field_name: str = "value") -> float:
    """Parse ``raw`` as a finite decimal number.

    Numbers pass through after a finiteness check; strings are read as plain
    decimals (``"1e3"`` and ``"-0.5"`` are fine, ``"abc"`` and ``"inf"`` are
    not). Blank input is rejected as well, callers that treat blanks as
    "not supplied" should test :func:`is_blank` first.
    """

    if isinstance(raw, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(raw, (int, float)):
        value = float(raw)
        if math.isnan(value) or math.isinf(value):
            raise ValidationError(f"{field_name} must be a finite number")
        return value
    if not isinstance(raw, str):
        raise ValidationError(f"{field_name} must be a number")
    text = raw.strip()
    if not text:
        raise ValidationError(f"{field_name} is required")
    if len(text) > _MAX_NUMBER_CHARS:
        raise ValidationError(f"{field_name} is too long")
    try:
        parsed = Decimal(text)
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid value for {field_name}") from exc
    if parsed.is_nan() or parsed.is_infinite():
        raise ValidationError(f"{field_name} must be a finite number")
    value = float(parsed)
    if math.isinf(value):
        raise ValidationError(f"{field_name} is out of range")
    return value


def try_parse_finite(raw: Any) -> float | None:
    """Like :func:`parse_finite` but return ``None`` instead of raising."""

    try:
        return parse_finite(raw)
    except ValidationError:
        return None


def get_int(
    data: Any,
    key: str,
    default: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read an integer setting from a mapping, falling back to ``default``.

    Settings come from ``config.yml``; malformed values never raise, they
    fall back to the default and are clamped into ``[minimum, maximum]``.
    """

    raw = data.get(key) if hasattr(data, "get") else None
    try:
        value = int(float(raw))
    except (TypeError, ValueError):
        value = default
    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


__all__ = ["is_blank", "parse_finite", "try_parse_finite", "get_int"]
