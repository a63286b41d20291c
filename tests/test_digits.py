import pytest

from dsakit.digits import (
    binary_to_decimal,
    decimal_to_binary,
    digit_sum,
    is_armstrong,
    is_prime,
)


def test_armstrong_numbers():
    found = [n for n in range(1, 1000) if is_armstrong(n)]
    assert [n for n in found if n >= 10] == [153, 370, 371, 407]


def test_armstrong_sign():
    assert is_armstrong(-153) is True
    assert is_armstrong(154) is False


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 255, 1024, 12345])
def test_binary_round_trip(n):
    binary = decimal_to_binary(n)
    assert set(str(binary)) <= {"0", "1"}
    assert int(str(binary), 2) == n
    assert binary_to_decimal(binary) == n


def test_binary_rejections():
    with pytest.raises(ValueError):
        binary_to_decimal(102)
    with pytest.raises(ValueError):
        binary_to_decimal(-1)
    with pytest.raises(ValueError):
        decimal_to_binary(-3)


def test_primes_below_thirty():
    assert [n for n in range(30) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_products_are_not_prime():
    for a in range(2, 12):
        for b in range(2, 12):
            assert is_prime(a * b) is False


def test_digit_sum():
    assert digit_sum(12345) == 15
    assert digit_sum(0) == 0
    for n in (7, 98, 4321):
        assert digit_sum(n * 10) == digit_sum(n)
        assert digit_sum(-n) == -digit_sum(n)