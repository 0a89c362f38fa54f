"""Sparse integer matrices stored as sorted ``(row, column, value)`` triples."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Sequence


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` by ``cols`` matrix holding only its listed entries.

    Entries are kept in row-major order; positions must be inside the
    matrix and may appear only once.
    """

    rows: int
    cols: int
    entries: tuple[tuple[int, int, int], ...] = ()

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        ordered = tuple(sorted((r, c, v) for r, c, v in self.entries))
        for r, c, _ in ordered:
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"entry ({r}, {c}) lies outside the matrix")
        positions = {(r, c) for r, c, _ in ordered}
        if len(positions) != len(ordered):
            raise ValueError("an entry position is given more than once")
        object.__setattr__(self, "entries", ordered)

    @classmethod
    def from_dense(cls, matrix: Sequence[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from the non-zero elements of ``matrix``."""
        cols = len(matrix[0]) if matrix else 0
        entries = tuple(
            (r, c, value)
            for r, row in enumerate(matrix)
            for c, value in enumerate(row)
            if value != 0
        )
        return cls(len(matrix), cols, entries)

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the sum; matching positions keep an entry even if it sums to zero."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("can't add matrices of different dimensions")
        combined: dict[tuple[int, int], int] = {}
        for r, c, v in (*self.entries, *other.entries):
            combined[r, c] = combined.get((r, c), 0) + v
        return SparseMatrix(
            self.rows, self.cols, tuple((r, c, v) for (r, c), v in combined.items())
        )

    def transpose(self) -> SparseMatrix:
        """Return the matrix with rows and columns exchanged."""
        return SparseMatrix(self.cols, self.rows, tuple((c, r, v) for r, c, v in self.entries))

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return the product ``self @ other``; entries that sum to zero are left out."""
        if self.cols != other.rows:
            raise ValueError("can't multiply matrices with these dimensions")
        left_rows = _group_rows(self.entries)
        right_cols = _group_rows(other.transpose().entries)
        product = []
        for r, row in left_rows:
            for c, column in right_cols:
                total = sum(value * column[k] for k, value in row.items() if k in column)
                if total != 0:
                    product.append((r, c, total))
        return SparseMatrix(self.rows, other.cols, tuple(product))

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix as lists of rows."""
        grid = [[0] * self.cols for _ in range(self.rows)]
        for r, c, v in self.entries:
            grid[r][c] = v
        return grid


def _group_rows(entries: tuple[tuple[int, int, int], ...]) -> list[tuple[int, dict[int, int]]]:
    return [
        (row, {c: v for _, c, v in group})
        for row, group in groupby(entries, key=lambda entry: entry[0])
    ]