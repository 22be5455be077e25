"""Function grapher plugin manifest."""

manifest = {
    "title": "Function Grapher",
    "summary": "Sample y = f(x) over a domain and lay it out on a drawing surface with ticks and axes.",
    "category": "Calculators",
    "blueprint": "grapher",
}

__all__ = ["manifest"]
