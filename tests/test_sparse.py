import pytest

from algokit.linalg import matmul
from algokit.sparse import SparseMatrix

DENSE_A = [[1, 0, 2], [0, 0, 3], [4, 0, 0]]
DENSE_B = [[0, 5, 0], [6, 0, 0], [0, 0, 7]]
DENSE_C = [[1, 0], [0, 2], [3, 0]]


def test_dense_round_trip():
    assert SparseMatrix.from_dense(DENSE_A).to_dense() == DENSE_A


def test_entries_are_sorted_row_major():
    m = SparseMatrix(2, 2, ((1, 0, 4), (0, 1, 3)))
    assert m.entries == ((0, 1, 3), (1, 0, 4))


def test_out_of_bounds_entry_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, ((2, 0, 1),))


def test_duplicate_entry_rejected():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, ((0, 0, 1), (0, 0, 2)))


def test_add_is_commutative():
    a = SparseMatrix.from_dense(DENSE_A)
    b = SparseMatrix.from_dense(DENSE_B)
    assert a.add(b) == b.add(a)


def test_add_with_empty_matrix_is_identity():
    a = SparseMatrix.from_dense(DENSE_A)
    assert a.add(SparseMatrix(3, 3)) == a


def test_add_negation_keeps_zero_entries():
    a = SparseMatrix.from_dense(DENSE_A)
    negated = SparseMatrix(3, 3, tuple((r, c, -v) for r, c, v in a.entries))
    total = a.add(negated)
    assert total.to_dense() == [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    assert len(total.entries) == len(a.entries)


def test_add_dimension_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2).add(SparseMatrix(2, 3))


def test_transpose_twice_is_original():
    a = SparseMatrix.from_dense(DENSE_C)
    assert a.transpose().transpose() == a


def test_transpose_matches_dense_transpose():
    a = SparseMatrix.from_dense(DENSE_C)
    assert a.transpose().to_dense() == [list(col) for col in zip(*DENSE_C)]


@pytest.mark.parametrize(
    "left, right",
    [(DENSE_A, DENSE_B), (DENSE_B, DENSE_A), (DENSE_A, DENSE_C), (DENSE_C, [[1, 2, 0], [0, 0, 3]])],
)
def test_multiply_matches_dense_product(left, right):
    product = SparseMatrix.from_dense(left).multiply(SparseMatrix.from_dense(right))
    assert product.to_dense() == matmul(left, right)


def test_multiply_omits_cancelled_sums():
    a = SparseMatrix.from_dense([[1, 1]])
    b = SparseMatrix.from_dense([[1], [-1]])
    assert a.multiply(b).entries == ()


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix(2, 3).multiply(SparseMatrix(2, 3))