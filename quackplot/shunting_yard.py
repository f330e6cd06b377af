"""Conversion of infix token sequences to postfix order."""

from __future__ import annotations

from typing import Iterable

from quackplot.tokens import Operator, Precedence, Token, TokenType


def _precedence(token: Token) -> Precedence:
    if isinstance(token, Operator):
        return token.precedence
    return Precedence.OTHER


def _push_operator(output: list[Token], stack: list[Token], op: Operator) -> None:
    while (
        stack
        and stack[-1].kind is not TokenType.LEFT_PAREN
        and op.precedence <= _precedence(stack[-1])
    ):
        output.append(stack.pop())
    stack.append(op)


def _close_paren(output: list[Token], stack: list[Token]) -> None:
    while stack and stack[-1].kind is not TokenType.LEFT_PAREN:
        output.append(stack.pop())
    if stack:
        stack.pop()


def _is_unary(
    op: Operator, previous: Token | None, output: list[Token], stack: list[Token]
) -> bool:
    if op.precedence != Precedence.ADDITIVE:
        return False
    if not stack and not output:
        return True
    return previous is not None and previous.kind in (
        TokenType.OPERATOR,
        TokenType.LEFT_PAREN,
    )


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix tokens into postfix order.

    Functions, variables and left parentheses wait on the operator stack. A ``+`` or
    ``-`` at the very start, or after an operator or left parenthesis, becomes
    unary negation.
    """
    output: list[Token] = []
    stack: list[Token] = []
    previous: Token | None = None
    for token in tokens:
        if token.kind is TokenType.NUMBER:
            output.append(token)
        elif token.kind is TokenType.RIGHT_PAREN:
            _close_paren(output, stack)
        elif token.kind is TokenType.OPERATOR:
            if _is_unary(token, previous, output, stack):
                stack.append(Operator("u-"))
            else:
                _push_operator(output, stack, token)
        else:
            stack.append(token)
        previous = token
    output.extend(reversed(stack))
    return output


class ShuntingYard:
    """Holds an infix expression and produces its postfix form."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self.tokens: list[Token] = list(tokens)

    def postfix(self, tokens: Iterable[Token] | None = None) -> list[Token]:
        """Postfix form of ``tokens``, or of the stored expression when none are given."""
        return to_postfix(self.tokens if tokens is None else tokens)

    def __str__(self) -> str:
        return "".join(str(token) for token in self.tokens)