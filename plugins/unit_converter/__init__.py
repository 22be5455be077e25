"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Table driven conversions for length, volume, mass, temperature, time and speed.",
    "blueprint": "unit_converter",
    "category": "Calculators",
}


__all__ = ["manifest"]
