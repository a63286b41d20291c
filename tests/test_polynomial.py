import pytest

from dsakit.polynomial import Term, combine_like_terms, format_polynomial, multiply

FIRST = [Term(45, 4), Term(7, 3), Term(8, 1), Term(-8, 0)]
SECOND = [Term(6, 4), Term(7, 3), Term(-5, 2), Term(3, 1), Term(3, 0)]


def _evaluate(terms, x):
    return sum(term.coefficient * x**term.power for term in terms)


def test_format_driver_polynomial():
    assert format_polynomial(FIRST) == "45x^4+7x^3+8x^1-8"


@pytest.mark.parametrize("x", [-3, -1, 0, 1, 2, 5])
def test_product_evaluates_to_product_of_values(x):
    product = multiply(FIRST, SECOND)
    assert _evaluate(product, x) == _evaluate(FIRST, x) * _evaluate(SECOND, x)


def test_product_has_one_term_per_power():
    product = multiply(FIRST, SECOND)
    powers = [term.power for term in product]
    assert len(powers) == len(set(powers))
    assert max(powers) == 8
    assert product[0] == Term(45 * 6, 8)


def test_combine_keeps_first_occurrence_order():
    terms = [Term(1, 2), Term(3, 1), Term(4, 2)]
    assert combine_like_terms(terms) == [Term(5, 2), Term(3, 1)]


def test_multiply_with_empty_polynomial():
    assert multiply([], SECOND) == []
    assert multiply(FIRST, []) == []


def test_format_empty():
    assert format_polynomial([]) == "0"