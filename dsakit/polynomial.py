"""Polynomials as ordered lists of terms: multiplication and printing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Term", "combine_like_terms", "multiply", "format_polynomial"]


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * x ** power``."""

    coefficient: int
    power: int


def combine_like_terms(terms: Iterable[Term]) -> list[Term]:
    """Add up terms of equal power, keeping the order in which powers first appear."""
    sums: dict[int, int] = {}
    for term in terms:
        sums[term.power] = sums.get(term.power, 0) + term.coefficient
    return [Term(coefficient, power) for power, coefficient in sums.items()]


def multiply(first: Iterable[Term], second: Iterable[Term]) -> list[Term]:
    """Multiply two polynomials term by term and combine like terms."""
    second = list(second)
    products = (
        Term(a.coefficient * b.coefficient, a.power + b.power)
        for a in first
        for b in second
    )
    return combine_like_terms(products)


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as ``45x^4+7x^3-8``; a power of zero shows the coefficient alone."""
    pieces = []
    for index, term in enumerate(terms):
        text = str(term.coefficient) if term.power == 0 else f"{term.coefficient}x^{term.power}"
        if index and term.coefficient >= 0:
            text = "+" + text
        pieces.append(text)
    return "".join(pieces) or "0"