import operator
from fractions import Fraction

import pytest

from dsakit.postfix import infix_to_postfix, is_operator, precedence

_APPLY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _evaluate(postfix):
    stack = []
    for symbol in postfix:
        if symbol in _APPLY:
            right = stack.pop()
            left = stack.pop()
            stack.append(_APPLY[symbol](left, right))
        else:
            stack.append(Fraction(int(symbol)))
    assert len(stack) == 1
    return stack[0]


def test_source_example():
    assert infix_to_postfix("x+y*z-k") == "xyz*+k-"


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1+2*3-4", Fraction(1) + 2 * 3 - 4),
        ("8/4-1+3*2", Fraction(8, 4) - 1 + 3 * 2),
        ("9-3-2", Fraction(9) - 3 - 2),
        ("8/2/2", Fraction(8) / 2 / 2),
        ("2*3+4*5-6/3", Fraction(2 * 3) + 4 * 5 - Fraction(6, 3)),
        ("7", Fraction(7)),
    ],
)
def test_postfix_evaluates_like_infix(expression, expected):
    assert _evaluate(infix_to_postfix(expression)) == expected


@pytest.mark.parametrize("expression", ["a+b*c-d/e", "x+y*z-k", "p*q*r", ""])
def test_characters_preserved_and_operands_in_order(expression):
    result = infix_to_postfix(expression)
    assert sorted(result) == sorted(expression)
    operands = [c for c in expression if not is_operator(c)]
    assert [c for c in result if not is_operator(c)] == operands


@pytest.mark.parametrize("symbol", ["+", "-", "*", "/"])
def test_is_operator_true(symbol):
    assert is_operator(symbol) is True


@pytest.mark.parametrize("symbol", ["a", "(", "^", "", "+-"])
def test_is_operator_false(symbol):
    assert is_operator(symbol) is False


def test_precedence_levels():
    assert precedence("*") == precedence("/") == 2
    assert precedence("+") == precedence("-") == 1
    assert precedence("x") == 0