"""Conversion utilities over the static category tables."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping

from common.forms import parse_finite
from common.validation import ValidationError

from .categories import Category, get_categories


class ConversionError(Exception):
    """Base exception for conversion failures."""


class InvalidUnitError(ConversionError):
    """Raised when a unit label is not part of the requested category."""


class UnknownCategoryError(ConversionError):
    """Raised when the requested category does not exist."""


class BadInputError(ConversionError):
    """Raised when user supplied values cannot be normalised."""


_SANITIZE_PATTERN = re.compile(r"\s+")


class Converter:
    """High level conversion API used by the Flask blueprint."""

    def __init__(self, categories: Mapping[str, Category] | None = None) -> None:
        self.categories = categories if categories is not None else get_categories()

    # ---- Listing helpers -------------------------------------------------
    def list_categories(self) -> List[str]:
        return list(self.categories.keys())

    def list_units(self, category: str) -> List[Dict[str, object]]:
        table = self.category(category)
        aliases: Dict[str, List[str]] = {unit: [] for unit in table.units}
        for alias, unit in table.aliases.items():
            aliases[unit].append(alias)
        return [
            {"symbol": unit, "aliases": aliases[unit], "base": unit == table.base}
            for unit in table.units
        ]

    def category(self, name: str) -> Category:
        if not isinstance(name, str) or name.strip().lower() not in self.categories:
            raise UnknownCategoryError(f"Unknown conversion category '{name}'.")
        return self.categories[name.strip().lower()]

    # ---- Conversion helpers ----------------------------------------------
    def convert(self, category: str, from_unit: str, to_unit: str, value: float | str) -> float:
        """Convert ``value`` between two units of ``category``.

        No rounding happens here; presentation is left to :func:`format_value`.
        """

        table = self.category(category)
        source = self._resolve_unit(table, from_unit)
        target = self._resolve_unit(table, to_unit)
        numeric_value = self._coerce_value(value)
        return table.convert(source, target, numeric_value)

    # ---- Internal utilities ----------------------------------------------
    def _coerce_value(self, value: float | str) -> float:
        try:
            return parse_finite(value, field_name="Value")
        except ValidationError as exc:
            raise BadInputError(str(exc)) from exc

    def _resolve_unit(self, table: Category, unit: str) -> str:
        if not isinstance(unit, str) or not unit.strip():
            raise InvalidUnitError("Unit symbol must be a non-empty string.")
        text = _SANITIZE_PATTERN.sub("", unit)
        if text in table.units:
            return text
        alias = table.aliases.get(text)
        if alias is not None:
            return alias
        raise InvalidUnitError(f"Unit '{unit}' is not part of the {table.name} category.")


def format_value(value: float, *, decimals: int = 2) -> str:
    """Format a converted value with a fixed number of decimals."""

    if decimals < 0:
        raise BadInputError("Decimal precision must be non-negative.")
    return f"{value:.{decimals}f}"


__all__ = [
    "Converter",
    "ConversionError",
    "InvalidUnitError",
    "UnknownCategoryError",
    "BadInputError",
    "format_value",
]
