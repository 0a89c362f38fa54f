import pytest

from algokit.nqueen import is_safe, solve_n_queens


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


def test_four_queens_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_solutions_are_non_attacking(n):
    board = solve_n_queens(n)
    queens = _queens(board)
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert solve_n_queens(n) is None


def test_empty_board():
    assert solve_n_queens(0) == []


def test_negative_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_is_safe_detects_row_and_diagonals():
    board = [[0] * 4 for _ in range(4)]
    board[1][0] = 1
    assert is_safe(board, 1, 2) is False
    assert is_safe(board, 0, 1) is False
    assert is_safe(board, 2, 1) is False
    assert is_safe(board, 3, 1) is True