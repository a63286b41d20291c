import pytest

from dsakit.searching import find_positions, ternary_search


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 31])
def test_ternary_search_finds_every_element(size):
    values = list(range(0, size * 3, 3))
    for index, value in enumerate(values):
        assert ternary_search(values, value) == index


def test_ternary_search_with_duplicates_returns_matching_index():
    values = [1, 2, 2, 2, 5, 8, 8, 9]
    for key in set(values):
        assert values[ternary_search(values, key)] == key


@pytest.mark.parametrize("key", [-1, 1, 4, 100])
def test_ternary_search_missing_raises(key):
    with pytest.raises(ValueError):
        ternary_search([0, 3, 6, 9], key)


def test_ternary_search_empty_raises():
    with pytest.raises(ValueError):
        ternary_search([], 5)


def test_find_positions_all_occurrences():
    assert find_positions([1.5, 2.0, 1.5, 3.0], 1.5) == [1, 3]


def test_find_positions_missing_is_empty():
    assert find_positions([1, 2, 3], 9) == []


def test_find_positions_positions_hold_element():
    values = [4, 7, 4, 4, 0]
    for position in find_positions(values, 4):
        assert values[position - 1] == 4


def test_find_positions_empty_raises():
    with pytest.raises(ValueError):
        find_positions([], 1)