"""The state of the graph: visible domain, plotting options and the current equation."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass

from quackplot.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from quackplot.tokens import Function, LeftParen, Number, Operator, RightParen, Token

FUNCTION_NAMES = frozenset({"x", "sin", "cos", "tan", "arccos", "arcsin", "arctan", "pi"})
OPERATOR_SYMBOLS = frozenset({"+", "-", "*", "/", "^"})

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def both_numbers(c1: str, c2: str) -> bool:
    """True when both characters are decimal digits."""
    return "0" <= c1 <= "9" and "0" <= c2 <= "9"


def both_letters(c1: str, c2: str) -> bool:
    """True when both characters are lowercase ASCII letters."""
    return "a" <= c1 <= "z" and "a" <= c2 <= "z"


def space_out(expression: str) -> str:
    """Put a space between neighbouring characters that belong to different tokens.

    Runs of digits, runs of lowercase letters and anything touching a decimal point
    stay together. Raises ValueError for an empty expression.
    """
    if not expression:
        raise ValueError("empty expression")
    pieces: list[str] = []
    for c1, c2 in zip(expression, expression[1:]):
        pieces.append(c1)
        if not both_numbers(c1, c2) and not both_letters(c1, c2) and "." not in (c1, c2):
            pieces.append(" ")
    pieces.append(expression[-1])
    return "".join(pieces)


def _parse_float(text: str) -> float:
    """Read the leading number of ``text`` as a single-precision value."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(1))
    try:
        (single,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        raise ValueError(f"number out of range: {text!r}") from None
    return single


def tokenize(expression: str) -> list[Token]:
    """Split an equation such as ``"sin(2*x)"`` into tokens.

    Raises ValueError when the expression is empty or a piece is not a known
    function, operator, parenthesis or number.
    """
    tokens: list[Token] = []
    for word in space_out(expression).split(" "):
        if not word:
            continue
        if word in FUNCTION_NAMES:
            tokens.append(Function(word))
        elif word in OPERATOR_SYMBOLS:
            tokens.append(Operator(word))
        elif word == "(":
            tokens.append(LeftParen())
        elif word == ")":
            tokens.append(RightParen())
        else:
            tokens.append(Number(_parse_float(word)))
    return tokens


@dataclass
class GraphInfo:
    """Everything needed to draw the graph of the current equation."""

    x_screen: float = float(SCREEN_WIDTH)
    y_screen: float = float(SCREEN_HEIGHT)
    x_min: float = -5.0
    x_max: float = 5.0
    y_min: float = -5.0
    y_max: float = 5.0
    num_points: int = 600
    input_status: bool = False
    polar: bool = False
    expression: tuple[Token, ...] = ()

    def set_x(self, x_min: float, x_max: float) -> None:
        """Set the visible horizontal range."""
        self.x_min = x_min
        self.x_max = x_max

    def set_y(self, y_min: float, y_max: float) -> None:
        """Set the visible vertical range."""
        self.y_min = y_min
        self.y_max = y_max

    def set_equation(self, equation: str) -> None:
        """Replace the expression; on a ValueError the old one is kept."""
        self.expression = tuple(tokenize(equation))

    def toggle_polar(self) -> None:
        """Switch between Cartesian and polar grids."""
        self.polar = not self.polar