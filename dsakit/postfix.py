"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

__all__ = ["is_operator", "precedence", "infix_to_postfix"]

_PRECEDENCE = {"*": 2, "/": 2, "+": 1, "-": 1}


def is_operator(symbol: str) -> bool:
    """Tell whether ``symbol`` is one of ``+ - * /``."""
    return symbol in _PRECEDENCE


def precedence(symbol: str) -> int:
    """Return 2 for ``*`` and ``/``, 1 for ``+`` and ``-``, 0 for anything else."""
    return _PRECEDENCE.get(symbol, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of one-character operands to postfix.

    Every character that is not an operator is copied as an operand; operators
    of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if not is_operator(symbol):
            output.append(symbol)
            continue
        while stack and precedence(symbol) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)