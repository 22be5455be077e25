"""Expression evaluation shared by the calculator and the grapher."""

from __future__ import annotations

import ast
import math
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from common.angle_mode import AngleMode


class EvaluationError(ValueError):
    """Raised when an expression cannot be parsed or evaluated.

    ``reason`` is one of ``"syntax"``, ``"unbound"``, ``"domain"`` or
    ``"non_finite"``. Only the last two depend on the bound values; the first
    two are properties of the expression text itself.
    """

    def __init__(self, message: str, *, reason: str = "syntax"):
        super().__init__(message)
        self.reason = reason

    @property
    def is_pointwise(self) -> bool:
        return self.reason in {"domain", "non_finite"}


_MAX_EXPR_LENGTH = 1024
_MAX_FACTORIAL = 170
_PREFIX_RE = re.compile(r"^y\s*=", re.IGNORECASE)
_OPERAND_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_.")
_ARITHMETIC_ERRORS = (ValueError, ZeroDivisionError, OverflowError)

CONSTANTS: Mapping[str, float] = {"pi": math.pi, "e": math.e, "tau": math.tau}


def strip_assignment_prefix(expression: str) -> str:
    """Drop a leading ``y=`` so ``"y = x^2"`` and ``"x^2"`` plot the same."""

    text = expression.strip()
    match = _PREFIX_RE.match(text)
    if match:
        text = text[match.end():].strip()
    return text


def _operand_start(text: str, end: int) -> int:
    """Index where the operand ending just before ``end`` begins."""

    pos = end - 1
    while pos >= 0 and text[pos].isspace():
        pos -= 1
    if pos < 0:
        return -1
    if text[pos] == ")":
        depth = 0
        while pos >= 0:
            if text[pos] == ")":
                depth += 1
            elif text[pos] == "(":
                depth -= 1
                if depth == 0:
                    break
            pos -= 1
        if pos < 0:
            return -1
        # include a function name such as sin(...)!
        while pos > 0 and text[pos - 1] in _OPERAND_CHARS:
            pos -= 1
        return pos
    if text[pos] not in _OPERAND_CHARS:
        return -1
    while pos > 0 and text[pos - 1] in _OPERAND_CHARS:
        pos -= 1
    return pos


def _expand_factorials(text: str) -> str:
    """Rewrite postfix ``n!`` as ``factorial(n)``."""

    search_from = 0
    while True:
        idx = text.find("!", search_from)
        if idx < 0:
            return text
        if text[idx + 1:idx + 2] == "=":
            search_from = idx + 2
            continue
        start = _operand_start(text, idx)
        if start < 0:
            raise EvaluationError("Factorial needs an operand", reason="syntax")
        operand = text[start:idx].strip()
        replacement = f"factorial({operand})"
        text = text[:start] + replacement + text[idx + 1:]
        search_from = start + len(replacement)


def _normalize_expression(expression: str) -> str:
    if not expression or not isinstance(expression, str):
        raise EvaluationError("Expression is required")
    text = strip_assignment_prefix(expression)
    if not text:
        raise EvaluationError("Expression is required")
    if len(text) > _MAX_EXPR_LENGTH:
        raise EvaluationError("Expression is too long")
    # Interpret caret as exponent for user convenience.
    text = text.replace("^", "**")
    return _expand_factorials(text)


def _validate_ast(node: ast.AST) -> None:
    if isinstance(node, ast.Expression):
        _validate_ast(node.body)
        return
    if isinstance(node, ast.BinOp):
        if not isinstance(node.op, (ast.Add, ast.Sub, ast.Mult, ast.Div, ast.Mod, ast.Pow)):
            raise EvaluationError("Operator not permitted")
        _validate_ast(node.left)
        _validate_ast(node.right)
        return
    if isinstance(node, ast.UnaryOp):
        if not isinstance(node.op, (ast.UAdd, ast.USub)):
            raise EvaluationError("Unary operator not permitted")
        _validate_ast(node.operand)
        return
    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name):
            raise EvaluationError("Only named functions are permitted")
        if node.keywords:
            raise EvaluationError("Keyword arguments are not supported")
        for arg in node.args:
            _validate_ast(arg)
        return
    if isinstance(node, ast.Name):
        return
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise EvaluationError("Only numeric literals are allowed")
        return
    raise EvaluationError("Unsupported syntax")


def _wrap_trig(fn: Callable[[float], float], *, use_degrees: bool) -> Callable[[float], float]:
    if not use_degrees:
        return fn

    def wrapped(value: float) -> float:
        return fn(value * math.pi / 180)

    return wrapped


def _factorial(value: float) -> float:
    if value < 0 or not float(value).is_integer():
        raise ValueError("factorial is only defined for non-negative integers")
    if value > _MAX_FACTORIAL:
        raise OverflowError("factorial result is too large")
    return float(math.factorial(int(value)))


def _log(value: float, base: float = math.e) -> float:
    return math.log(value, base)


def _make_function_table(angle_mode: AngleMode) -> dict[str, Callable[..., float]]:
    use_degrees = angle_mode is AngleMode.DEGREES
    return {
        "sin": _wrap_trig(math.sin, use_degrees=use_degrees),
        "cos": _wrap_trig(math.cos, use_degrees=use_degrees),
        "tan": _wrap_trig(math.tan, use_degrees=use_degrees),
        "asin": math.asin,
        "acos": math.acos,
        "atan": math.atan,
        "sinh": math.sinh,
        "cosh": math.cosh,
        "tanh": math.tanh,
        "log": _log,
        "ln": math.log,
        "log10": math.log10,
        "exp": math.exp,
        "sqrt": math.sqrt,
        "abs": abs,
        "floor": math.floor,
        "ceil": math.ceil,
        "factorial": _factorial,
        "min": min,
        "max": max,
    }


def _check_names(
    node: ast.AST,
    names: Iterable[str],
    functions: Mapping[str, Callable[..., float]],
) -> None:
    known = set(names)
    called = {
        id(child.func)
        for child in ast.walk(node)
        if isinstance(child, ast.Call) and isinstance(child.func, ast.Name)
    }
    for child in ast.walk(node):
        if not isinstance(child, ast.Name):
            continue
        if id(child) in called:
            if child.id not in functions:
                raise EvaluationError(f"Unknown function '{child.id}'", reason="unbound")
        elif child.id not in known:
            raise EvaluationError(f"Unknown variable '{child.id}'", reason="unbound")


def _binary(op: ast.operator, left: float, right: float) -> float:
    if isinstance(op, ast.Add):
        return left + right
    if isinstance(op, ast.Sub):
        return left - right
    if isinstance(op, ast.Mult):
        return left * right
    if isinstance(op, ast.Div):
        return left / right
    if isinstance(op, ast.Mod):
        return left % right
    if isinstance(op, ast.Pow):
        return math.pow(left, right)
    raise EvaluationError("Operator not permitted")  # pragma: no cover - guarded by _validate_ast


def _eval_node(
    node: ast.AST,
    context: Mapping[str, float],
    functions: Mapping[str, Callable[..., float]],
) -> float:
    try:
        if isinstance(node, ast.Constant):
            value = node.value
        elif isinstance(node, ast.Name):
            if node.id not in context:
                raise EvaluationError(f"Unknown variable '{node.id}'", reason="unbound")
            value = context[node.id]
        elif isinstance(node, ast.UnaryOp):
            operand = _eval_node(node.operand, context, functions)
            value = +operand if isinstance(node.op, ast.UAdd) else -operand
        elif isinstance(node, ast.BinOp):
            left = _eval_node(node.left, context, functions)
            right = _eval_node(node.right, context, functions)
            value = _binary(node.op, left, right)
        elif isinstance(node, ast.Call):
            func = functions.get(node.func.id)
            if func is None:
                raise EvaluationError(f"Unknown function '{node.func.id}'", reason="unbound")
            args = [_eval_node(arg, context, functions) for arg in node.args]
            try:
                value = func(*args)
            except TypeError as exc:
                raise EvaluationError(
                    f"Wrong number of arguments for '{node.func.id}'", reason="syntax"
                ) from exc
        else:  # pragma: no cover - guarded by _validate_ast
            raise EvaluationError("Unsupported syntax")
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise EvaluationError("Expression returned a non-numeric value", reason="domain")
        value = float(value)
    except EvaluationError:
        raise
    except _ARITHMETIC_ERRORS as exc:
        raise EvaluationError(f"Math domain error: {exc}", reason="domain") from exc

    if math.isnan(value) or math.isinf(value):
        raise EvaluationError("Result is not finite", reason="non_finite")
    return value


@dataclass(frozen=True)
class CompiledExpression:
    """A parsed, validated expression bound to one angle mode.

    Syntax and name errors are raised while compiling, so evaluating only
    fails for the supplied values (``"domain"`` / ``"non_finite"``).
    """

    source: str
    angle_mode: AngleMode
    variables: tuple[str, ...]
    tree: ast.Expression = field(repr=False, compare=False)
    functions: Mapping[str, Callable[..., float]] = field(repr=False, compare=False)

    def evaluate(self, bindings: Mapping[str, float] | None = None) -> float:
        bindings = bindings or {}
        missing = [name for name in self.variables if name not in bindings]
        if missing:
            raise EvaluationError(f"No value bound for '{missing[0]}'", reason="unbound")
        context = {**CONSTANTS, **bindings}
        try:
            return _eval_node(self.tree.body, context, self.functions)
        except RecursionError as exc:
            raise EvaluationError("Expression is too deeply nested") from exc

    def __call__(self, x: float) -> float:
        return self.evaluate({"x": x})


def compile_expression(
    expression: str,
    angle_mode: AngleMode | str = AngleMode.DEGREES,
    *,
    variables: Iterable[str] = ("x",),
) -> CompiledExpression:
    """Parse ``expression`` once for repeated evaluation."""

    mode = AngleMode.parse(angle_mode)
    normalized = _normalize_expression(expression)
    try:
        tree = ast.parse(normalized, mode="eval")
        _validate_ast(tree)
    except SyntaxError as exc:
        raise EvaluationError(f"Could not parse expression: {exc.msg}") from exc
    except RecursionError as exc:
        raise EvaluationError("Expression is too deeply nested") from exc

    names = tuple(variables)
    for name in names:
        if not name.isidentifier() or name.startswith("__"):
            raise EvaluationError(f"Invalid variable name '{name}'")
    functions = _make_function_table(mode)
    _check_names(tree, (*CONSTANTS, *names), functions)
    return CompiledExpression(
        source=normalized,
        angle_mode=mode,
        variables=names,
        tree=tree,
        functions=functions,
    )


def evaluate(
    expression: str,
    variables: Mapping[str, float] | None = None,
    angle_mode: AngleMode | str = AngleMode.DEGREES,
) -> float:
    """Evaluate ``expression`` once with the given variable bindings."""

    variables = dict(variables or {})
    compiled = compile_expression(expression, angle_mode, variables=variables.keys())
    return compiled.evaluate(variables)


def format_display(value: float, max_chars: int = 12) -> str:
    """Render a calculator result for the display, at most ``max_chars`` long."""

    if float(value).is_integer() and abs(value) < 1e16:
        text = str(int(value))
    else:
        text = repr(float(value))
    return text[:max_chars]


def calculate(
    expression: str,
    *,
    angle_mode: AngleMode | str = AngleMode.DEGREES,
    variables: Mapping[str, float] | None = None,
    max_chars: int = 12,
) -> dict[str, object]:
    """Evaluate a calculator entry and return its value plus display text."""

    mode = AngleMode.parse(angle_mode)
    result = evaluate(expression, variables, mode)
    return {
        "result": result,
        "display": format_display(result, max_chars),
        "angle_mode": mode.value,
    }


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
