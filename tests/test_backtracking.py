import pytest

from dsakit.backtracking import (
    combinations_of_size,
    hanoi_moves,
    keypad_combinations,
    rat_in_maze,
    solve_n_queens,
    solve_sudoku,
)

SOURCE_SUDOKU = [
    [3, 0, 6, 5, 0, 8, 4, 0, 0],
    [5, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 8, 7, 0, 0, 0, 0, 3, 1],
    [0, 0, 3, 0, 1, 0, 0, 8, 0],
    [9, 0, 0, 8, 6, 3, 0, 0, 5],
    [0, 5, 0, 0, 9, 0, 6, 0, 0],
    [1, 3, 0, 0, 0, 0, 2, 5, 0],
    [0, 0, 0, 0, 0, 0, 0, 7, 4],
    [0, 0, 5, 2, 0, 6, 3, 0, 0],
]


def _queens_valid(board):
    n = len(board)
    queens = [(r, row.index("Q")) for r, row in enumerate(board)]
    if any(row.count("Q") != 1 for row in board):
        return False
    cols = {c for _, c in queens}
    rising = {r + c for r, c in queens}
    falling = {r - c for r, c in queens}
    return len(cols) == len(rising) == len(falling) == n


def _follow(grid, path):
    moves = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}
    x, y = 0, 0
    seen = {(0, 0)}
    for letter in path:
        dx, dy = moves[letter]
        x, y = x + dx, y + dy
        assert 0 <= x < len(grid) and 0 <= y < len(grid)
        assert grid[x][y] == 1
        assert (x, y) not in seen
        seen.add((x, y))
    return x, y


def test_four_queens_matches_known_boards():
    boards = solve_n_queens(4)
    expected = [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]
    assert sorted(boards) == sorted(expected)


@pytest.mark.parametrize("n", [1, 5, 6])
def test_queens_boards_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_queens_valid(board) for board in boards)
    assert len({tuple(b) for b in boards}) == len(boards)


def test_queens_impossible_sizes():
    assert solve_n_queens(2) == []
    assert solve_n_queens(3) == []


def test_queens_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_rat_in_open_two_by_two():
    assert rat_in_maze([[1, 1], [1, 1]]) == ["DR", "RD"]


def test_rat_paths_are_valid():
    grid = [
        [1, 0, 0, 0],
        [1, 1, 0, 1],
        [1, 1, 0, 0],
        [0, 1, 1, 1],
    ]
    paths = rat_in_maze(grid)
    assert paths
    assert len(set(paths)) == len(paths)
    for path in paths:
        assert _follow(grid, path) == (3, 3)


def test_rat_blocked_start_and_exit():
    assert rat_in_maze([[0, 1], [1, 1]]) == []
    assert rat_in_maze([[1, 1], [1, 0]]) == []


def test_rat_single_cell():
    assert rat_in_maze([[1]]) == [""]


def test_rat_rejects_non_square():
    with pytest.raises(ValueError):
        rat_in_maze([[1, 1, 1], [1, 1, 1]])
    with pytest.raises(ValueError):
        rat_in_maze([])


def test_sudoku_solution_is_valid_and_keeps_givens():
    solved = solve_sudoku(SOURCE_SUDOKU)
    digits = set(range(1, 10))
    assert all(set(row) == digits for row in solved)
    assert all({solved[r][c] for r in range(9)} == digits for c in range(9))
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            box = {solved[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
            assert box == digits
    for r in range(9):
        for c in range(9):
            if SOURCE_SUDOKU[r][c]:
                assert solved[r][c] == SOURCE_SUDOKU[r][c]
    assert SOURCE_SUDOKU[0][1] == 0


def test_sudoku_without_solution():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_sudoku_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_keypad_source_example():
    words = keypad_combinations([2, 3, 4])
    assert words[0] == "adg"
    assert words[-1] == "cfi"
    assert len(set(words)) == len(words) == 3 * 3 * 3
    assert all(w[0] in "abc" and w[1] in "def" and w[2] in "ghi" for w in words)


def test_keypad_edge_cases():
    assert keypad_combinations([]) == [""]
    assert keypad_combinations([2, 1]) == []
    assert keypad_combinations([7]) == list("pqrs")
    with pytest.raises(ValueError):
        keypad_combinations([10])


def test_combinations_of_size():
    combos = combinations_of_size([1, 2, 3, 4], 2)
    assert combos[0] == (1, 2)
    assert combos[-1] == (3, 4)
    assert all(a < b for a, b in combos)
    assert len(set(combos)) == len(combos) == 6
    assert combinations_of_size([1, 2], 3) == []
    assert combinations_of_size([1, 2], 0) == [()]
    with pytest.raises(ValueError):
        combinations_of_size([1], -1)


@pytest.mark.parametrize("n", [0, 1, 3, 5])
def test_hanoi_moves_are_legal(n):
    moves = hanoi_moves(n)
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disc, src, dst in moves:
        assert rods[src] and rods[src][-1] == disc
        rods[src].pop()
        assert not rods[dst] or rods[dst][-1] > disc
        rods[dst].append(disc)
    assert rods["C"] == list(range(n, 0, -1))
    assert len(moves) == 2 ** n - 1


def test_hanoi_single_disc_and_errors():
    assert hanoi_moves(1, "X", "Y", "Z") == [(1, "X", "Z")]
    with pytest.raises(ValueError):
        hanoi_moves(-1)