"""Small recursive classics: counting, sequences and series."""

from __future__ import annotations

__all__ = [
    "combination",
    "fibonacci",
    "factorial",
    "josephus",
    "is_palindrome",
    "count_digit_one",
    "taylor_exp",
    "countdown",
]


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def combination(n: float, r: float) -> float:
    """Return nCr as a float, by the rule nCr = (n / r) * (n-1)C(r-1).

    Any ``r`` not above zero gives 1.
    """
    result = 1.0
    while r > 0:
        result *= n / r
        n -= 1
        r -= 1
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting fib(0) = 0 and fib(1) = 1."""
    _non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def factorial(n: int) -> int:
    """Return ``n!``; raises ValueError for a negative number."""
    _non_negative("n", n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def josephus(n: int, k: int) -> int:
    """Return the 1-based place that survives when every ``k``-th of ``n`` is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))


def count_digit_one(n: int) -> int:
    """Return how many digits 1 appear in all the integers from 1 to ``n``."""
    if n <= 0:
        return 0
    count = 0
    place = 1
    while place <= n:
        high, rest = divmod(n, place * 10)
        digit, low = divmod(rest, place)
        count += high * place
        if digit > 1:
            count += place
        elif digit == 1:
            count += low + 1
        place *= 10
    return count


def taylor_exp(x: float, terms: int) -> float:
    """Return the Taylor sum of e**x up to the term x**terms / terms!."""
    _non_negative("terms", terms)
    total = 1.0
    term = 1.0
    for i in range(1, terms + 1):
        term *= x / i
        total += term
    return total


def countdown(n: int) -> list[int]:
    """Return ``n, n-1, ..., 1``; raises ValueError for a negative number."""
    _non_negative("n", n)
    return list(range(n, 0, -1))