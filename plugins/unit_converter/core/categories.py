"""Static conversion tables.

Linear categories store one scale factor per unit (its multiple of the
category base unit) and convert with ``value * factor(from) / factor(to)``.
Temperature is affine, so it stores a to-base and a from-base function per
unit and every conversion goes through degrees Celsius.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Dict, Mapping

from .registry import CategoryConfigError, scale_factor

AffineFn = Callable[[float], float]


@dataclass(frozen=True)
class LinearCategory:
    kind = "linear"

    name: str
    base: str
    units: tuple[str, ...]
    factors: Mapping[str, float]
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [unit for unit in self.units if unit not in self.factors]
        if missing:
            raise CategoryConfigError(f"{self.name}: no factor for {', '.join(missing)}")
        if self.base not in self.units:
            raise CategoryConfigError(f"{self.name}: base unit '{self.base}' is not listed")

    def convert(self, from_unit: str, to_unit: str, value: float) -> float:
        if from_unit == to_unit:
            return value
        return value * self.factors[from_unit] / self.factors[to_unit]


@dataclass(frozen=True)
class AffineCategory:
    kind = "affine"

    name: str
    base: str
    units: tuple[str, ...]
    to_base: Mapping[str, AffineFn]
    from_base: Mapping[str, AffineFn]
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for unit in self.units:
            if unit not in self.to_base or unit not in self.from_base:
                raise CategoryConfigError(f"{self.name}: no path between '{unit}' and '{self.base}'")

    def convert(self, from_unit: str, to_unit: str, value: float) -> float:
        if from_unit == to_unit:
            return value
        return self.from_base[to_unit](self.to_base[from_unit](value))


Category = LinearCategory | AffineCategory


# label -> Pint definition; the first entry of each table is its base unit.
_LINEAR_TABLES: Dict[str, Dict[str, str]] = {
    "length": {
        "m": "meter",
        "cm": "centimeter",
        "km": "kilometer",
        "in": "inch",
        "ft": "foot",
    },
    "volume": {
        "L": "liter",
        "mL": "milliliter",
        "m³": "meter ** 3",
        "gal": "gallon",
        "ft³": "foot ** 3",
    },
    "mass": {
        "g": "gram",
        "kg": "kilogram",
        "lb": "pound",
        "oz": "ounce",
        "ton": "short_ton",
    },
    "time": {
        "sec": "second",
        "min": "minute",
        "hr": "hour",
        "day": "day",
        "week": "week",
    },
    "speed": {
        "m/s": "meter / second",
        "km/h": "kilometer / hour",
        "mph": "mile / hour",
        "knot": "knot",
        "ft/s": "foot / second",
    },
}

# Picker order from the converter screen.
_DISPLAY_ORDER: Dict[str, tuple[str, ...]] = {
    "length": ("cm", "m", "km", "in", "ft"),
    "volume": ("mL", "L", "m³", "gal", "ft³"),
    "mass": ("g", "kg", "lb", "oz", "ton"),
    "temperature": ("°C", "°F", "K"),
    "time": ("sec", "min", "hr", "day", "week"),
    "speed": ("m/s", "km/h", "mph", "knot", "ft/s"),
}

_ALIASES: Dict[str, Dict[str, str]] = {
    "length": {"meter": "m", "inch": "in", "foot": "ft", "feet": "ft"},
    "volume": {"m3": "m³", "m^3": "m³", "ft3": "ft³", "ft^3": "ft³", "l": "L", "ml": "mL"},
    "mass": {"gram": "g", "pound": "lb", "ounce": "oz"},
    "temperature": {
        "C": "°C",
        "degC": "°C",
        "celsius": "°C",
        "F": "°F",
        "degF": "°F",
        "fahrenheit": "°F",
        "kelvin": "K",
    },
    "time": {"s": "sec", "h": "hr", "hour": "hr", "minute": "min"},
    "speed": {"kph": "km/h", "kt": "knot", "knots": "knot"},
}


def _build_linear(name: str, table: Mapping[str, str]) -> LinearCategory:
    base_label = next(iter(table))
    base_definition = table[base_label]
    factors = {
        label: 1.0 if label == base_label else scale_factor(definition, base_definition)
        for label, definition in table.items()
    }
    return LinearCategory(
        name=name,
        base=base_label,
        units=_DISPLAY_ORDER[name],
        factors=factors,
        aliases=_ALIASES.get(name, {}),
    )


def _build_temperature() -> AffineCategory:
    return AffineCategory(
        name="temperature",
        base="°C",
        units=_DISPLAY_ORDER["temperature"],
        to_base={
            "°C": lambda v: v,
            "°F": lambda v: (v - 32) * 5 / 9,
            "K": lambda v: v - 273.15,
        },
        from_base={
            "°C": lambda v: v,
            "°F": lambda v: v * 9 / 5 + 32,
            "K": lambda v: v + 273.15,
        },
        aliases=_ALIASES["temperature"],
    )


@lru_cache(maxsize=1)
def get_categories() -> Mapping[str, Category]:
    """Build every category once; configuration defects surface here."""

    categories: Dict[str, Category] = {}
    for name in _DISPLAY_ORDER:
        if name == "temperature":
            categories[name] = _build_temperature()
        else:
            categories[name] = _build_linear(name, _LINEAR_TABLES[name])
    return categories


__all__ = [
    "AffineCategory",
    "Category",
    "CategoryConfigError",
    "LinearCategory",
    "get_categories",
]
