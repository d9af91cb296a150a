import os, re
import numbers
import shared.blas_env  # noqa: F401
import numpy as np

# ------- Tunables (App settings, can override in Azure) -------
STRASSEN_THRESHOLD = os.getenv("STRASSEN_THRESHOLD", "64")     # base-case crossover
MM_DTYPE           = os.getenv("MM_DTYPE", "int32").lower()   # int8/int16/int32/int64
STRASSEN_WORKERS   = os.getenv("STRASSEN_WORKERS", "1")        # top-level fan-out width
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_DIM_SINGLE     = int(os.getenv("MAX_DIM_SINGLE", "4096"))  # reject bigger HTTP payloads

_DTYPES = {
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
}


def _positive_int(value, name: str) -> int:
    # bool is an Integral; floats would truncate silently
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        n = int(value)
    elif isinstance(value, str) and re.fullmatch(r"\s*[+-]?\d+\s*", value):
        n = int(value)
    else:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if n < 1:
        raise ValueError(f"{name} must be >= 1, got {n}")
    return n


def resolve_dtype(dtype=None) -> np.dtype:
    """Working dtype: explicit argument first, then MM_DTYPE. Signed ints only."""
    if dtype is None:
        dtype = MM_DTYPE
    if isinstance(dtype, str):
        if dtype.lower() not in _DTYPES:
            raise ValueError(f"Unsupported dtype {dtype!r}; expected one of {sorted(_DTYPES)}")
        dtype = _DTYPES[dtype.lower()]
    dt = np.dtype(dtype)
    if dt.kind != "i":
        raise ValueError(f"Working dtype must be a signed integer type, got {dt}")
    return dt


def resolve_threshold(threshold=None) -> int:
    return _positive_int(STRASSEN_THRESHOLD if threshold is None else threshold,
                         "STRASSEN_THRESHOLD")


def resolve_workers(workers=None) -> int:
    return _positive_int(STRASSEN_WORKERS if workers is None else workers,
                         "STRASSEN_WORKERS")
