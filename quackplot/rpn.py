"""Evaluation of postfix token sequences."""

from __future__ import annotations

from typing import Iterable

from quackplot.tokens import Precedence, Token, TokenType

_NO_ARGUMENT = ("x", "pi")


def evaluate(postfix: Iterable[Token], x: float) -> float:
    """Evaluate a postfix expression with the variable ``x`` bound to ``x``.

    A function takes its argument from the stack when one is there, and ``x``
    otherwise; ``x`` and ``pi`` never take one. Tokens of other kinds are skipped.
    Raises ValueError when an operator lacks operands or nothing is left to return.
    """
    stack: list[float] = []

    def pop() -> float:
        if not stack:
            raise ValueError("malformed expression: missing operand")
        return stack.pop()

    for token in postfix:
        match token.kind:
            case TokenType.NUMBER:
                stack.append(token.value)
            case TokenType.FUNCTION:
                value = x
                if stack and token.name not in _NO_ARGUMENT:
                    value = stack.pop()
                stack.append(token.apply(value))
            case TokenType.OPERATOR:
                if token.precedence == Precedence.NEGATE:
                    stack.append(-pop())
                else:
                    second = pop()
                    first = pop()
                    stack.append(token.evaluate(first, second))
    return pop()


class RPN:
    """A postfix expression that can be evaluated for any ``x``."""

    def __init__(self, postfix: Iterable[Token] = ()) -> None:
        self.postfix: tuple[Token, ...] = tuple(postfix)

    def set_input(self, postfix: Iterable[Token]) -> None:
        """Replace the expression."""
        self.postfix = tuple(postfix)

    def calculate(self, x: float) -> float:
        """Value of the expression at ``x``."""
        return evaluate(self.postfix, x)

    def __call__(self, x: float = 0.0) -> float:
        return self.calculate(x)