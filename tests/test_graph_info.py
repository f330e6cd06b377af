import pytest

from quackplot.graph_info import (
    GraphInfo,
    both_letters,
    both_numbers,
    space_out,
    tokenize,
)
from quackplot.rpn import evaluate
from quackplot.shunting_yard import to_postfix
from quackplot.tokens import Function, LeftParen, Number, Operator, RightParen


def test_both_numbers_cases_from_source():
    assert both_numbers("6", "8")
    assert both_numbers("2", "0")
    assert not both_numbers("(", "1")


def test_both_letters():
    assert both_letters("s", "i")
    assert not both_letters("x", "^")
    assert not both_letters("S", "i")


@pytest.mark.parametrize(
    "raw, spaced",
    [
        ("68.62*sin(41.72*x^2)", "68.62 * sin ( 41.72 * x ^ 2 )"),
        ("x^2", "x ^ 2"),
        ("(1-tan(5*cos(2*x)))", "( 1 - tan ( 5 * cos ( 2 * x ) ) )"),
    ],
)
def test_space_out_cases_from_source(raw, spaced):
    assert space_out(raw) == spaced


def test_space_out_empty_raises():
    with pytest.raises(ValueError):
        space_out("")


def test_tokenize_x_squared():
    assert tokenize("x^2") == [Function("x"), Operator("^"), Number(2.0)]


def test_tokenize_parentheses_and_function():
    assert tokenize("sin(x)") == [Function("sin"), LeftParen(), Function("x"), RightParen()]


@pytest.mark.parametrize(
    "expression", ["x^2", "sin(x)", "1-tan(2*x+5/8*cos(6*x))", "(1-tan(5*cos(2*x)))"]
)
def test_tokens_print_back_as_spaced_expression(expression):
    printed = " ".join(str(token) for token in tokenize(expression))
    assert printed == space_out(expression)


def test_tokenize_decimal_is_single_precision_close():
    (token,) = tokenize("68.62")
    assert token.value == pytest.approx(68.62, rel=1e-6)


@pytest.mark.parametrize("bad", ["y", "S", "", "."])
def test_tokenize_rejects_unknown_words(bad):
    with pytest.raises(ValueError):
        tokenize(bad)


def test_tokenize_rejects_number_too_large():
    with pytest.raises(ValueError):
        tokenize("9" * 50)


def test_defaults():
    info = GraphInfo()
    assert (info.x_min, info.x_max, info.y_min, info.y_max) == (-5, 5, -5, 5)
    assert info.num_points == 600
    assert not info.input_status
    assert not info.polar
    assert info.expression == ()


def test_set_x_and_set_y():
    info = GraphInfo()
    info.set_x(-2.0, 3.0)
    info.set_y(-1.0, 4.0)
    assert (info.x_min, info.x_max) == (-2.0, 3.0)
    assert (info.y_min, info.y_max) == (-1.0, 4.0)


def test_toggle_polar_twice_restores():
    info = GraphInfo()
    info.toggle_polar()
    assert info.polar
    info.toggle_polar()
    assert not info.polar


def test_set_equation_sequence_from_source():
    info = GraphInfo()
    info.set_equation("x^2")
    info.set_equation("sin(x)")
    info.set_equation("1-tan(2*x+5/8*cos(6*x))")
    assert info.expression == tuple(tokenize("1-tan(2*x+5/8*cos(6*x))"))


def test_set_equation_evaluates():
    info = GraphInfo()
    info.set_equation("x^2")
    assert evaluate(to_postfix(info.expression), 3) == 9.0


def test_invalid_equation_keeps_previous():
    info = GraphInfo()
    info.set_equation("x^2")
    before = info.expression
    with pytest.raises(ValueError):
        info.set_equation("y+1")
    assert info.expression == before