import pytest

from dsakit.matrices import DimensionError, column_sums, multiply, row_sums

A = [[1, 2, 3], [4, 5, 6]]
B = [[7, 8], [9, 10], [11, 12]]


def _transpose(matrix):
    return [list(column) for column in zip(*matrix)]


def _identity(n):
    return [[1 if r == c else 0 for c in range(n)] for r in range(n)]


def test_row_sums_of_single_row():
    assert row_sums([[3, 4, 5]]) == [sum([3, 4, 5])]


def test_row_and_column_totals_agree():
    assert sum(row_sums(A)) == sum(column_sums(A))


def test_column_sums_are_row_sums_of_transpose():
    assert column_sums(B) == row_sums(_transpose(B))


def test_sum_lengths_match_shape():
    assert len(row_sums(A)) == len(A)
    assert len(column_sums(A)) == len(A[0])


def test_ragged_matrix_rejected():
    with pytest.raises(DimensionError):
        row_sums([[1, 2], [3]])
    with pytest.raises(DimensionError):
        column_sums([[1], [2, 3]])


def test_multiply_by_identity():
    assert multiply(A, _identity(3)) == A
    assert multiply(_identity(2), A) == A


def test_multiply_transpose_rule():
    product = multiply(A, B)
    assert _transpose(product) == multiply(_transpose(B), _transpose(A))


def test_multiply_shape():
    product = multiply(A, B)
    assert len(product) == len(A)
    assert all(len(row) == len(B[0]) for row in product)


def test_multiply_small_known_value():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_incompatible_shapes():
    with pytest.raises(DimensionError, match="Columns of A must equal Rows of B"):
        multiply(A, A)


def test_multiply_empty_left_gives_empty():
    assert multiply([], B) == []