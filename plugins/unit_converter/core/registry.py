"""Shared Pint registry helpers for the unit converter core."""

from __future__ import annotations

from functools import lru_cache

from pint import UnitRegistry
from pint.errors import DimensionalityError, UndefinedUnitError


class CategoryConfigError(RuntimeError):
    """Raised when a category table references a unit Pint cannot resolve."""


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return a singleton :class:`~pint.UnitRegistry` instance."""

    return UnitRegistry()


def scale_factor(definition: str, base: str) -> float:
    """Return how many ``base`` units one ``definition`` unit is worth."""

    registry = get_registry()
    try:
        quantity = registry.Quantity(1, definition).to(base)
    except UndefinedUnitError as exc:
        raise CategoryConfigError(f"Unknown unit definition '{definition}'") from exc
    except DimensionalityError as exc:
        raise CategoryConfigError(f"'{definition}' cannot be expressed in '{base}'") from exc
    factor = float(quantity.magnitude)
    if factor <= 0:
        raise CategoryConfigError(f"'{definition}' has a non-positive scale factor")
    return factor


__all__ = ["CategoryConfigError", "get_registry", "scale_factor"]
