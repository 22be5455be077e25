"""Exports for the calculator core."""

from .engine import (
    CONSTANTS,
    CompiledExpression,
    EvaluationError,
    calculate,
    compile_expression,
    evaluate,
    format_display,
    strip_assignment_prefix,
)

__all__ = [
    "CONSTANTS",
    "CompiledExpression",
    "EvaluationError",
    "calculate",
    "compile_expression",
    "evaluate",
    "format_display",
    "strip_assignment_prefix",
]
