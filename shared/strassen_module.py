import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from shared.config import resolve_dtype, resolve_threshold, resolve_workers
from shared.errors import ShapeMismatch
from shared.log_utils import get_logger
from shared.matrix_ops import add, subtract, split_quadrants, combine_quadrants, standard_multiply
from shared.shape_utils import (
    as_matrix, validate_matrices, padded_size, pad_matrix, extract_matrix,
)


def _products(A11, A12, A21, A22, B11, B12, B21, B22):
    """Operand pairs of the seven Strassen products M1..M7, in order."""
    return [
        (add(A11, A22),      add(B11, B22)),
        (add(A21, A22),      B11),
        (A11,                subtract(B12, B22)),
        (A22,                subtract(B21, B11)),
        (add(A11, A12),      B22),
        (subtract(A21, A11), add(B11, B12)),
        (subtract(A12, A22), add(B21, B22)),
    ]


def strassen_recursive(A: np.ndarray, B: np.ndarray, threshold: int = None,
                       logger: logging.Logger = None, depth: int = 0,
                       workers: int = 1) -> np.ndarray:
    """
    Strassen product of two n x n matrices, n a power of two.

    n <= threshold falls back to standard_multiply. With workers > 1 the seven
    products of this level are computed on a thread pool and joined before the
    quadrants are combined; the levels below always run sequentially.
    """
    return _strassen(A, B, resolve_threshold(threshold), logger or get_logger(), depth, workers)


def _strassen(A, B, threshold: int, logger: logging.Logger, depth: int = 0, workers: int = 1):
    # threshold is already validated; recursion never re-resolves it
    n = A.shape[0]
    if A.shape != (n, n) or B.shape != (n, n) or n & (n - 1):
        raise ShapeMismatch(f"Engine needs equal power-of-two squares, got A{A.shape} B{B.shape}")

    if n <= threshold:
        logger.debug(f"[depth={depth}] base n={n}")
        return standard_multiply(A, B, dtype=A.dtype)

    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")
    pairs = _products(*split_quadrants(A), *split_quadrants(B))

    if workers > 1:
        with ThreadPoolExecutor(max_workers=min(workers, 7)) as pool:
            futures = [pool.submit(_strassen, X, Y, threshold, logger, depth + 1)
                       for X, Y in pairs]
            M1, M2, M3, M4, M5, M6, M7 = [f.result() for f in futures]
    else:
        M1, M2, M3, M4, M5, M6, M7 = [_strassen(X, Y, threshold, logger, depth + 1)
                                      for X, Y in pairs]

    C11 = add(subtract(add(M1, M4), M5), M7)
    C12 = add(M3, M5)
    C21 = add(M2, M4)
    C22 = add(subtract(add(M1, M3), M2), M6)
    return combine_quadrants(C11, C12, C21, C22)


def strassen_multiply(A, B, threshold: int = None, dtype=None, workers: int = None,
                      logger: logging.Logger = None) -> np.ndarray:
    """
    A (r1 x c1) @ B (c1 x c2) via Strassen.

    Both operands are zero-padded to one common power-of-two square, multiplied
    recursively, and the r1 x c2 result is cut back out. Inputs are never
    modified. Raises IncompatibleShapes before any work if the shapes do not
    conform, UnsupportedElementType for non-integer input.
    """
    logger = logger or get_logger()
    threshold = resolve_threshold(threshold)
    workers = resolve_workers(workers)
    dt = resolve_dtype(dtype)

    A = as_matrix(A, dt)
    B = as_matrix(B, dt)
    validate_matrices(A, B)

    P = padded_size(A, B)
    logger.info(f"A{A.shape} @ B{B.shape}: padded={P}, threshold={threshold}, "
                f"dtype={dt}, workers={workers}")
    Ap = pad_matrix(A, P)
    Bp = pad_matrix(B, P)
    Cpad = _strassen(Ap, Bp, threshold, logger, workers=workers)
    return extract_matrix(Cpad, A.shape[0], B.shape[1])
