"""Small number puzzles worked on the decimal digits of integers."""

from __future__ import annotations

__all__ = [
    "is_armstrong",
    "binary_to_decimal",
    "decimal_to_binary",
    "is_prime",
    "digit_sum",
]


def _digits(n: int) -> list[int]:
    return [int(char) for char in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits.

    A negative number is compared with the negated sum for its absolute value.
    """
    sign = -1 if n < 0 else 1
    return sign * sum(digit ** 3 for digit in _digits(n)) == n


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary numeral, e.g. 101 gives 5.

    Raises ValueError for a negative number or a digit other than 0 and 1.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    result = 0
    for digit in _digits(n):
        if digit not in (0, 1):
            raise ValueError(f"{n} is not a binary numeral")
        result = result * 2 + digit
    return result


def decimal_to_binary(n: int) -> int:
    """Return the integer whose decimal digits spell ``n`` in binary.

    Raises ValueError for a negative number.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    result = 0
    place = 1
    while n:
        result += (n & 1) * place
        n >>= 1
        place *= 10
    return result


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime by trial division up to ``n // 2``."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def digit_sum(n: int) -> int:
    """Return the sum of the digits of ``n``, negated when ``n`` is negative."""
    sign = -1 if n < 0 else 1
    return sign * sum(_digits(n))