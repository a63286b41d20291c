"""Backtracking searches: queens, mazes, sudoku, keypad words, combinations and Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, product
from typing import Any

__all__ = [
    "solve_n_queens",
    "rat_in_maze",
    "solve_sudoku",
    "keypad_combinations",
    "combinations_of_size",
    "hanoi_moves",
]

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))
_SUDOKU_SIZE = 9


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens.

    Each board is a list of row strings with ``Q`` for a queen and ``.`` for
    an empty square. Queens are placed column by column, trying rows from
    the top. Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [["."] * n for _ in range(n)]
    rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in rows or row + col in rising or col - row in falling:
                continue
            board[row][col] = "Q"
            rows.add(row)
            rising.add(row + col)
            falling.add(col - row)
            place(col + 1)
            board[row][col] = "."
            rows.discard(row)
            rising.discard(row + col)
            falling.discard(col - row)

    place(0)
    return solutions


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of a square maze.

    Cells holding 1 are open. A path is a string of the moves ``D``, ``L``,
    ``R`` and ``U`` and never visits a cell twice; paths come in the order
    the moves are tried (D, L, R, U). Raises ValueError unless the grid is
    square and non-empty.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("the maze must be a non-empty square grid")
    if grid[0][0] == 0:
        return []
    visited = {(0, 0)}
    path: list[str] = []
    paths: list[str] = []

    def walk(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(path))
            return
        for letter, dx, dy in _MAZE_MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < n and 0 <= ny < n):
                continue
            if (nx, ny) in visited or grid[nx][ny] != 1:
                continue
            visited.add((nx, ny))
            path.append(letter)
            walk(nx, ny)
            path.pop()
            visited.discard((nx, ny))

    walk(0, 0)
    return paths


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Fill the zeros of a 9x9 sudoku and return the solved grid as a new list.

    Empty cells are filled in reading order, trying digits 1 to 9. Raises
    ValueError when the grid is not 9x9 or has no solution.
    """
    cells = [list(row) for row in grid]
    if len(cells) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in cells):
        raise ValueError("a sudoku grid must be 9x9")

    def used(row: int, col: int, num: int) -> bool:
        if num in cells[row]:
            return True
        if any(cells[r][col] == num for r in range(_SUDOKU_SIZE)):
            return True
        top, left = row - row % 3, col - col % 3
        return any(
            cells[r][c] == num
            for r in range(top, top + 3)
            for c in range(left, left + 3)
        )

    def empty_cells() -> Iterator[tuple[int, int]]:
        for row in range(_SUDOKU_SIZE):
            for col in range(_SUDOKU_SIZE):
                if cells[row][col] == 0:
                    yield row, col

    def solve() -> bool:
        spot = next(empty_cells(), None)
        if spot is None:
            return True
        row, col = spot
        for num in range(1, 10):
            if not used(row, col, num):
                cells[row][col] = num
                if solve():
                    return True
                cells[row][col] = 0
        return False

    if not solve():
        raise ValueError("no solution exists")
    return cells


def keypad_combinations(digits: Iterable[int]) -> list[str]:
    """Return every word a phone keypad spells for ``digits``, in keypad order.

    Digits 0 and 1 carry no letters, so any sequence holding one spells
    nothing. Raises ValueError for a digit outside 0..9.
    """
    letters = []
    for digit in digits:
        digit = int(digit)
        if not 0 <= digit <= 9:
            raise ValueError(f"{digit} is not a keypad digit")
        letters.append(_KEYPAD[digit])
    return ["".join(word) for word in product(*letters)]


def combinations_of_size(values: Iterable[Any], r: int) -> list[tuple[Any, ...]]:
    """Return every selection of ``r`` elements, keeping their original order.

    Raises ValueError for a negative ``r``.
    """
    if r < 0:
        raise ValueError("r must not be negative")
    return list(combinations(list(values), r))


def hanoi_moves(
    n: int, source: Any = "A", helper: Any = "B", destination: Any = "C"
) -> list[tuple[int, Any, Any]]:
    """Return the moves ``(disc, from_rod, to_rod)`` that carry ``n`` discs to ``destination``.

    Disc 1 is the smallest. Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")

    def moves(count: int, src: Any, spare: Any, dst: Any) -> Iterator[tuple[int, Any, Any]]:
        if count == 0:
            return
        yield from moves(count - 1, src, dst, spare)
        yield count, src, dst
        yield from moves(count - 1, spare, src, dst)

    return list(moves(n, source, helper, destination))