"""The N-queens puzzle solved by backtracking column by column."""

from __future__ import annotations


def is_safe(board: list[list[int]], row: int, col: int) -> bool:
    """Tell whether a queen at ``(row, col)`` is free of the queens to its left."""
    n = len(board)
    if any(board[row][c] == 1 for c in range(col)):
        return False
    upper = zip(range(row, -1, -1), range(col, -1, -1))
    lower = zip(range(row, n), range(col, -1, -1))
    return not any(board[r][c] == 1 for r, c in (*upper, *lower))


def _place(board: list[list[int]], col: int) -> bool:
    n = len(board)
    if col >= n:
        return True
    for row in range(n):
        if is_safe(board, row, col):
            board[row][col] = 1
            if _place(board, col + 1):
                return True
            board[row][col] = 0
    return False


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return the first board, as rows of 0 and 1, that holds ``n`` non-attacking queens.

    Returns None when no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    return board if _place(board, 0) else None