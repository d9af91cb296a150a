import numpy as np

from shared.errors import ShapeMismatch
from shared.shape_utils import as_matrix


def _same_square(A, B, op):
    if A.shape != B.shape or A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ShapeMismatch(f"{op}: A,B must be square and same size, got A{A.shape} B{B.shape}")


def add(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _same_square(A, B, "add")
    return A + B


def subtract(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _same_square(A, B, "subtract")
    return A - B


def extract_submatrix(M: np.ndarray, row: int, col: int, size: int) -> np.ndarray:
    """Copy of the size x size block of M starting at (row, col)."""
    if row < 0 or col < 0 or row + size > M.shape[0] or col + size > M.shape[1]:
        raise ShapeMismatch(f"Block ({row},{col})+{size} outside matrix {M.shape}")
    return M[row:row + size, col:col + size].copy()


def split_quadrants(M: np.ndarray):
    n = M.shape[0]
    if M.shape != (n, n) or n % 2:
        raise ShapeMismatch(f"Cannot split {M.shape} into quadrants")
    half = n // 2
    return (extract_submatrix(M, 0, 0, half), extract_submatrix(M, 0, half, half),
            extract_submatrix(M, half, 0, half), extract_submatrix(M, half, half, half))


def combine_quadrants(C11, C12, C21, C22) -> np.ndarray:
    n2 = C11.shape[0]
    for q in (C11, C12, C21, C22):
        if q.shape != (n2, n2):
            raise ShapeMismatch(f"Quadrants must all be {n2}x{n2}, got {q.shape}")
    C = np.empty((n2*2, n2*2), dtype=C11.dtype)
    C[:n2, :n2] = C11;  C[:n2, n2:] = C12
    C[n2:, :n2] = C21;  C[n2:, n2:] = C22
    return C


def standard_multiply(A, B, dtype=None) -> np.ndarray:
    """
    Classical O(n^3) product, C[i][j] = sum_k A[i][k] * B[k][j].

    Integer dot in numpy does not go through BLAS: it is the plain
    multiply-accumulate loop, carried out in the working dtype, so overflow
    wraps like native fixed-width integers. No shape validation here; the
    caller guarantees A's column count equals B's row count.
    """
    A = as_matrix(A, dtype)
    B = as_matrix(B, A.dtype if dtype is None else dtype)
    return A.dot(B)
