import pytest

from algobox.matrix import MatrixShapeError, add, format_matrix, multiply

A = [[1, 2], [3, 4]]
B = [[2, 0], [1, 2]]
IDENTITY = [[1, 0], [0, 1]]


def test_multiply_example():
    assert multiply(A, B) == [[4, 4], [10, 8]]


def test_multiply_by_identity_is_unchanged():
    assert multiply(A, IDENTITY) == A
    assert multiply(IDENTITY, B) == B


def test_multiply_result_shape():
    first = [[1, 2, 3], [4, 5, 6]]
    second = [[1], [0], [1]]
    result = multiply(first, second)
    assert len(result) == 2
    assert all(len(row) == 1 for row in result)


def test_multiply_by_zero_matrix():
    zero = [[0, 0], [0, 0]]
    assert multiply(A, zero) == zero


def test_multiply_shape_mismatch():
    with pytest.raises(MatrixShapeError):
        multiply([[1, 2, 3]], [[1, 2, 3]])


def test_ragged_rows_rejected():
    with pytest.raises(MatrixShapeError):
        multiply([[1, 2], [3]], B)


def test_add_example():
    assert add(A, B) == [[3, 2], [4, 6]]


def test_add_is_commutative():
    assert add(A, B) == add(B, A)


def test_add_shape_mismatch():
    with pytest.raises(MatrixShapeError):
        add(A, [[1, 2, 3], [4, 5, 6]])


def test_shape_error_is_value_error():
    with pytest.raises(ValueError):
        add(A, [[1]])


def test_format_matrix():
    assert format_matrix(A) == "1 2\n3 4"