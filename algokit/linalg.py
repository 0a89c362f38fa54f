"""Dense matrix products and LU decomposition with triangular solves."""

from __future__ import annotations

import math
from typing import Sequence

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


def _require_square(a: Matrix, what: str) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError(f"{what} must be a square matrix")
    return n


def matmul(a: Matrix, b: Matrix) -> list[list[float]]:
    """Return the product ``a @ b`` of two matrices given as lists of rows."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions of the matrices do not agree")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def vector_norm(v: Vector) -> float:
    """Return the Euclidean length of ``v``."""
    return math.sqrt(math.fsum(x * x for x in v))


def lu_decomposition(a: Matrix) -> tuple[list[list[float]], list[list[float]]]:
    """Split the square matrix ``a`` into ``(lower, upper)`` with ``lower @ upper == a``.

    The lower factor has ones on its diagonal. No pivoting is done, so a zero
    pivot raises ValueError.
    """
    n = _require_square(a, "matrix")
    lower = [[0.0] * n for _ in range(n)]
    upper = [[0.0] * n for _ in range(n)]
    for k in range(n):
        lower[k][k] = 1.0
        for i in range(k, n):
            upper[k][i] = a[k][i] - sum(lower[k][s] * upper[s][i] for s in range(k))
        if k + 1 < n and upper[k][k] == 0:
            raise ValueError(f"zero pivot at row {k}; the matrix needs pivoting")
        for i in range(k + 1, n):
            partial = sum(lower[i][s] * upper[s][k] for s in range(k))
            lower[i][k] = (a[i][k] - partial) / upper[k][k]
    return lower, upper


def forward_substitution(lower: Matrix, b: Vector) -> list[float]:
    """Solve ``lower @ y == b`` for a lower triangular matrix."""
    n = _require_square(lower, "lower factor")
    if len(b) != n:
        raise ValueError("right-hand side does not match the matrix size")
    y: list[float] = []
    for row, value in zip(lower, b):
        i = len(y)
        y.append((value - sum(coef * known for coef, known in zip(row, y))) / row[i])
    return y


def backward_substitution(upper: Matrix, b: Vector) -> list[float]:
    """Solve ``upper @ x == b`` for an upper triangular matrix."""
    n = _require_square(upper, "upper factor")
    if len(b) != n:
        raise ValueError("right-hand side does not match the matrix size")
    x = [0.0] * n
    for i in reversed(range(n)):
        partial = sum(upper[i][j] * x[j] for j in range(i + 1, n))
        x[i] = (b[i] - partial) / upper[i][i]
    return x


def solve_lu(lower: Matrix, upper: Matrix, b: Vector) -> list[float]:
    """Solve ``lower @ upper @ x == b`` by forward then backward substitution."""
    return backward_substitution(upper, forward_substitution(lower, b))