"""Calculator plugin manifest."""

manifest = {
    "title": "Calculator",
    "summary": "Evaluate expressions with a shared degree/radian mode.",
    "category": "Calculators",
    "blueprint": "calculator",
}

__all__ = ["manifest"]
