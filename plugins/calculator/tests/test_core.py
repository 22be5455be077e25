import math

import pytest

from common.angle_mode import AngleMode
from plugins.calculator.core import (
    EvaluationError,
    calculate,
    compile_expression,
    evaluate,
    format_display,
    strip_assignment_prefix,
)


def test_evaluate_basic_expression():
    assert evaluate("3*4+5") == 17


def test_caret_is_power():
    assert evaluate("2^3") == 8.0
    assert evaluate("x^2", {"x": -3}) == 9.0


def test_trig_follows_angle_mode():
    assert evaluate("sin(90)", angle_mode=AngleMode.DEGREES) == pytest.approx(1.0)
    assert evaluate("cos(180)", angle_mode="degree") == pytest.approx(-1.0)
    assert evaluate("sin(pi/2)", angle_mode=AngleMode.RADIANS) == pytest.approx(1.0)
    assert evaluate("tan(45)", angle_mode=AngleMode.DEGREES) == pytest.approx(1.0)


def test_inverse_trig_is_not_rebound():
    assert evaluate("asin(1)", angle_mode=AngleMode.DEGREES) == pytest.approx(math.pi / 2)


def test_constants_and_functions():
    assert evaluate("pi") == pytest.approx(math.pi)
    assert evaluate("ln(e)") == pytest.approx(1.0)
    assert evaluate("log(100, 10)") == pytest.approx(2.0)
    assert evaluate("sqrt(16) + abs(-2)") == 6.0


@pytest.mark.parametrize("expression", ["y=x+1", "Y = x+1", "  y=  x+1"])
def test_leading_y_equals_is_stripped(expression):
    assert strip_assignment_prefix(expression) == "x+1"
    assert evaluate(expression, {"x": 2}) == 3.0


def test_postfix_factorial():
    assert evaluate("5!") == 120.0
    assert evaluate("(2+1)!") == 6.0
    assert evaluate("3!!") == 720.0
    assert evaluate("2*3!") == 12.0


def test_syntax_errors_are_reported():
    with pytest.raises(EvaluationError) as excinfo:
        evaluate("3 +* 4")
    assert excinfo.value.reason == "syntax"
    with pytest.raises(EvaluationError):
        evaluate("__import__('os').system('echo')")
    with pytest.raises(EvaluationError):
        evaluate("!3")


def test_unbound_names_are_reported():
    with pytest.raises(EvaluationError) as excinfo:
        evaluate("x + 1")
    assert excinfo.value.reason == "unbound"
    with pytest.raises(EvaluationError) as excinfo:
        evaluate("foo(2)")
    assert excinfo.value.reason == "unbound"


@pytest.mark.parametrize("expression", ["1/0", "ln(-1)", "sqrt(-4)", "(-8)^(1/3)", "10^400", "(-1)!"])
def test_domain_errors_are_pointwise(expression):
    with pytest.raises(EvaluationError) as excinfo:
        evaluate(expression)
    assert excinfo.value.reason == "domain"
    assert excinfo.value.is_pointwise


def test_compiled_expression_reuses_parse():
    compiled = compile_expression("x^2 + 1", AngleMode.RADIANS)
    assert compiled(0.0) == 1.0
    assert compiled(2.0) == 5.0
    with pytest.raises(EvaluationError) as excinfo:
        compile_expression("1/x")(0.0)
    assert excinfo.value.reason == "domain"


def test_format_display_truncates_to_twelve_chars():
    assert format_display(17.0) == "17"
    assert format_display(0.1 + 0.2) == "0.3000000000"
    assert format_display(1 / 3) == "0.3333333333"
    assert len(format_display(math.pi * 1e5)) <= 12


def test_calculate_keeps_full_precision():
    result = calculate("1/3", angle_mode="radian")
    assert result["result"] == 1 / 3
    assert result["display"] == "0.3333333333"
    assert result["angle_mode"] == "radian"


def test_deeply_nested_expression_is_rejected():
    with pytest.raises(EvaluationError) as excinfo:
        evaluate("-" * 1020 + "1")
    assert excinfo.value.reason == "syntax"
    assert not excinfo.value.is_pointwise


def test_entry_points_share_degree_default():
    assert evaluate("sin(90)") == pytest.approx(1.0)
    assert compile_expression("cos(x)").angle_mode is AngleMode.DEGREES
    assert calculate("tan(45)")["angle_mode"] == "degree"
