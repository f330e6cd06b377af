"""Tokens that make up an expression: numbers, operators, functions and parentheses."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, ClassVar


class TokenType(IntEnum):
    """The kind of a token."""

    TOKEN = 0
    NUMBER = 1
    OPERATOR = 2
    RIGHT_PAREN = 3
    LEFT_PAREN = 4
    FUNCTION = 5
    ALPHA = 999


class Precedence(IntEnum):
    """Binding strength of an operator; higher binds tighter."""

    NEGATE = 0
    ADDITIVE = 1
    MULTIPLICATIVE = 2
    EXPONENT = 3
    OTHER = 4


_PRECEDENCE = {
    "u-": Precedence.NEGATE,
    "+": Precedence.ADDITIVE,
    "-": Precedence.ADDITIVE,
    "*": Precedence.MULTIPLICATIVE,
    "/": Precedence.MULTIPLICATIVE,
    "^": Precedence.EXPONENT,
}


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and value % 2 == 1


def _divide(first: float, second: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN instead of raising."""
    if second == 0:
        if first == 0 or math.isnan(first):
            return math.nan
        return math.copysign(math.inf, first) * math.copysign(1.0, second)
    return first / second


def _power(base: float, exponent: float) -> float:
    """IEEE power: domain errors give NaN, overflow and zero poles give infinities."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}

_UNARY: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "arccos": math.acos,
    "arcsin": math.asin,
    "arctan": math.atan,
}


def parse_number(text: str) -> float:
    """Read a decimal number of the form ``digits[.digits]``.

    Characters are taken as digits by their distance from ``'0'``; nothing is validated.
    """
    whole, _, fraction = text.partition(".")
    value = 0.0
    for char in whole:
        value = value * 10 + (ord(char) - ord("0"))
    place = 0.1
    for char in fraction:
        value += (ord(char) - ord("0")) * place
        place /= 10
    return value


class Token:
    """A plain token carrying its raw text."""

    kind: ClassVar[TokenType] = TokenType.TOKEN

    def __init__(self, text: str = "") -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.text!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is Token and other.text == self.text

    def __hash__(self) -> int:
        return hash(("Token", self.text))


@dataclass(frozen=True)
class Number(Token):
    """A numeric literal."""

    value: float = 0.0
    kind: ClassVar[TokenType] = TokenType.NUMBER

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Operator(Token):
    """An arithmetic operator; ``"u-"`` is unary negation."""

    symbol: str = ""
    kind: ClassVar[TokenType] = TokenType.OPERATOR

    @property
    def precedence(self) -> Precedence:
        return _PRECEDENCE.get(self.symbol, Precedence.OTHER)

    def evaluate(self, first: float, second: float) -> float:
        """Apply this binary operator to two operands."""
        try:
            func = _BINARY[self.symbol]
        except KeyError:
            raise ValueError(f"{self.symbol!r} is not a binary operator") from None
        return func(float(first), float(second))

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Function(Operator):
    """A named function, the variable ``x`` or the constant ``pi``."""

    kind: ClassVar[TokenType] = TokenType.FUNCTION

    @property
    def name(self) -> str:
        return self.symbol

    def apply(self, value: float) -> float:
        """Evaluate the function at ``value``; ``x`` returns it unchanged, ``pi`` ignores it."""
        if self.symbol == "pi":
            return 4 * math.atan(1)
        func = _UNARY.get(self.symbol)
        if func is None:
            return value
        try:
            return func(value)
        except ValueError:
            return math.nan


@dataclass(frozen=True)
class LeftParen(Token):
    """An opening parenthesis."""

    kind: ClassVar[TokenType] = TokenType.LEFT_PAREN

    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen(Token):
    """A closing parenthesis."""

    kind: ClassVar[TokenType] = TokenType.RIGHT_PAREN

    def __str__(self) -> str:
        return ")"


@dataclass(frozen=True)
class Alpha(Token):
    """A single letter."""

    char: str = ""
    kind: ClassVar[TokenType] = TokenType.ALPHA

    def __str__(self) -> str:
        return self.char