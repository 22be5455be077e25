"""Facade for the unit converter core utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List

from .categories import AffineCategory, CategoryConfigError, LinearCategory, get_categories
from .converter import (
    BadInputError,
    ConversionError,
    Converter,
    InvalidUnitError,
    UnknownCategoryError,
    format_value,
)


@lru_cache(maxsize=1)
def _converter() -> Converter:
    return Converter()


def list_categories() -> List[str]:
    """Return the supported conversion categories."""

    return _converter().list_categories()


def list_units(category: str) -> List[Dict[str, object]]:
    """Return metadata for the units belonging to ``category``."""

    return _converter().list_units(category)


def convert(category: str, from_unit: str, to_unit: str, value: float | str) -> float:
    """Convert ``value`` between units of ``category`` at full precision."""

    return _converter().convert(category, from_unit, to_unit, value)


def convert_for_display(
    category: str,
    from_unit: str,
    to_unit: str,
    value: float | str,
    *,
    decimals: int = 2,
) -> Dict[str, object]:
    """Convert ``value`` and attach the rounded display text."""

    result = convert(category, from_unit, to_unit, value)
    return {
        "value": result,
        "unit": to_unit,
        "category": category,
        "formatted": format_value(result, decimals=decimals),
    }


__all__ = [
    "AffineCategory",
    "BadInputError",
    "CategoryConfigError",
    "ConversionError",
    "InvalidUnitError",
    "LinearCategory",
    "UnknownCategoryError",
    "convert",
    "convert_for_display",
    "format_value",
    "get_categories",
    "list_categories",
    "list_units",
]
