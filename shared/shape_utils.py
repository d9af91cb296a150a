import numpy as np

from shared.config import resolve_dtype
from shared.errors import IncompatibleShapes, UnsupportedElementType, ShapeMismatch


def as_matrix(M, dtype=None) -> np.ndarray:
    """
    Normalise a caller-supplied matrix (nested lists or ndarray) to a 2D
    ndarray of the working integer dtype.

    Ragged, missing or non-2D input -> IncompatibleShapes.
    Non-integer elements, or values outside the dtype range -> UnsupportedElementType.
    Zero-sized 2D input passes through; is_valid_for_multiplication rejects it.
    """
    dt = resolve_dtype(dtype)
    if M is None:
        raise IncompatibleShapes("Matrix is missing")
    if isinstance(M, np.ndarray) and M.ndim == 2 and M.dtype == dt:
        return M

    try:
        arr = np.asarray(M)
    except ValueError as e:
        raise IncompatibleShapes(f"Matrix rows must all have the same length ({e})") from None

    if arr.ndim != 2:
        raise IncompatibleShapes(f"Expected a 2D matrix, got ndim={arr.ndim} shape={arr.shape}")
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=dt)
    if arr.dtype.kind not in "iu":
        raise UnsupportedElementType(f"Matrix elements must be integers, got dtype {arr.dtype}")

    if not np.can_cast(arr.dtype, dt):
        info = np.iinfo(dt)
        lo, hi = int(arr.min()), int(arr.max())
        if lo < info.min or hi > info.max:
            raise UnsupportedElementType(
                f"Values in [{lo}, {hi}] do not fit {dt} [{info.min}, {info.max}]")
    return arr.astype(dt)


def is_valid_for_multiplication(A, B) -> bool:
    if A is None or B is None:
        return False
    try:
        shape_a, shape_b = np.shape(A), np.shape(B)
    except ValueError:  # ragged nested lists
        return False
    if len(shape_a) != 2 or len(shape_b) != 2:
        return False
    if 0 in shape_a or 0 in shape_b:
        return False
    return shape_a[1] == shape_b[0]


def validate_matrices(A, B):
    if is_valid_for_multiplication(A, B):
        return
    if A is None or B is None:
        raise IncompatibleShapes("Input matrices cannot be missing.")
    try:
        shape_a, shape_b = np.shape(A), np.shape(B)
    except ValueError:
        raise IncompatibleShapes("Matrix rows must all have the same length") from None
    if len(shape_a) != 2 or len(shape_b) != 2:
        raise IncompatibleShapes(f"Expected 2D matrices: A{shape_a}, B{shape_b}")
    if 0 in shape_a or 0 in shape_b:
        raise IncompatibleShapes(f"Input matrices cannot be empty: A{shape_a}, B{shape_b}")
    raise IncompatibleShapes(
        f"Matrix A's column count must match Matrix B's row count: A{shape_a} @ B{shape_b}")


def next_pow2(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def padded_size(A: np.ndarray, B: np.ndarray) -> int:
    """Common power-of-two side both operands are padded to."""
    return next_pow2(max(A.shape[0], A.shape[1], B.shape[0], B.shape[1]))


def pad_matrix(M: np.ndarray, size: int) -> np.ndarray:
    rows, cols = M.shape
    if rows > size or cols > size:
        raise ShapeMismatch(f"Cannot pad {M.shape} down to {size}x{size}")
    if rows == size and cols == size:
        return M
    padded = np.zeros((size, size), dtype=M.dtype)
    padded[:rows, :cols] = M
    return padded


def extract_matrix(M: np.ndarray, rows: int, cols: int) -> np.ndarray:
    """Inverse of pad_matrix: copy of the top-left rows x cols block."""
    if rows > M.shape[0] or cols > M.shape[1]:
        raise ShapeMismatch(f"Cannot extract {rows}x{cols} from {M.shape}")
    return M[:rows, :cols].copy()
