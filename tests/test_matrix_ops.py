"""Matrix arithmetic primitives and the classical multiplier."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from shared.errors import ShapeMismatch, UnsupportedElementType
from shared.matrix_ops import (
    add, subtract, extract_submatrix, split_quadrants, combine_quadrants, standard_multiply,
)


def test_add_and_subtract_elementwise():
    A = np.array([[1, 2], [3, 4]], dtype=np.int32)
    B = np.array([[10, 20], [30, 40]], dtype=np.int32)
    assert_array_equal(add(A, B), [[11, 22], [33, 44]])
    assert_array_equal(subtract(A, B), [[-9, -18], [-27, -36]])


def test_add_does_not_touch_operands():
    A = np.ones((2, 2), dtype=np.int32)
    B = np.ones((2, 2), dtype=np.int32)
    add(A, B)
    subtract(A, B)
    assert_array_equal(A, np.ones((2, 2)))
    assert_array_equal(B, np.ones((2, 2)))


@pytest.mark.parametrize("op", [add, subtract])
def test_shape_mismatch_is_an_assertion(op):
    A = np.zeros((2, 2), dtype=np.int32)
    B = np.zeros((4, 4), dtype=np.int32)
    with pytest.raises(ShapeMismatch):
        op(A, B)
    with pytest.raises(AssertionError):
        op(np.zeros((2, 3), dtype=np.int32), np.zeros((2, 3), dtype=np.int32))


def test_add_wraps_like_int32():
    big = np.array([[2**31 - 1]], dtype=np.int32)
    one = np.array([[1]], dtype=np.int32)
    assert add(big, one)[0, 0] == -2**31
    assert subtract(-big - one, one)[0, 0] == 2**31 - 1


def test_extract_submatrix_offsets_and_copy():
    M = np.arange(16, dtype=np.int32).reshape(4, 4)
    S = extract_submatrix(M, 1, 2, 2)
    assert_array_equal(S, [[6, 7], [10, 11]])
    S[0, 0] = -1
    assert M[1, 2] == 6


def test_extract_submatrix_out_of_bounds():
    M = np.zeros((4, 4), dtype=np.int32)
    with pytest.raises(ShapeMismatch):
        extract_submatrix(M, 3, 0, 2)


def test_split_then_combine_restores_matrix():
    M = np.arange(64, dtype=np.int32).reshape(8, 8)
    q11, q12, q21, q22 = split_quadrants(M)
    assert_array_equal(q12, M[:4, 4:])
    assert_array_equal(q21, M[4:, :4])
    assert_array_equal(combine_quadrants(q11, q12, q21, q22), M)


def test_split_quadrants_rejects_odd_size():
    with pytest.raises(ShapeMismatch):
        split_quadrants(np.zeros((3, 3), dtype=np.int32))


def test_combine_quadrants_placement():
    q = [np.full((2, 2), v, dtype=np.int32) for v in (1, 2, 3, 4)]
    R = combine_quadrants(*q)
    assert R.shape == (4, 4)
    assert_array_equal(R, [[1, 1, 2, 2],
                           [1, 1, 2, 2],
                           [3, 3, 4, 4],
                           [3, 3, 4, 4]])


def test_combine_quadrants_requires_equal_sizes():
    a = np.zeros((2, 2), dtype=np.int32)
    with pytest.raises(ShapeMismatch):
        combine_quadrants(a, a, a, np.zeros((1, 1), dtype=np.int32))


def test_standard_multiply_rectangular():
    A = [[1, 2, 3], [4, 5, 6]]
    B = [[7, 8], [9, 10], [11, 12]]
    C = standard_multiply(A, B)
    assert C.dtype == np.int32
    assert_array_equal(C, [[58, 64], [139, 154]])


def test_standard_multiply_keeps_requested_dtype():
    A = np.array([[2**20]], dtype=np.int64)
    C = standard_multiply(A, A, dtype=np.int64)
    assert C.dtype == np.int64
    assert C[0, 0] == 2**40


def test_standard_multiply_wraps_on_overflow():
    A = np.array([[2**16]], dtype=np.int32)
    assert standard_multiply(A, A)[0, 0] == 0  # 2**32 mod 2**32


def test_standard_multiply_rejects_floats():
    with pytest.raises(UnsupportedElementType):
        standard_multiply([[1.5]], [[2]])
