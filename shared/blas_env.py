import os

# must run before numpy is first imported; BLAS reads these once at load
BLAS_THREAD_VARS = ["OMP_NUM_THREADS", "OPENBLAS_NUM_THREADS", "MKL_NUM_THREADS",
                    "NUMEXPR_NUM_THREADS", "VECLIB_MAXIMUM_THREADS"]


def pin_blas_threads(n: int = 1):
    """Keep single-threaded BLAS on Functions (avoid oversubscription on Consumption)."""
    for v in BLAS_THREAD_VARS:
        os.environ.setdefault(v, str(n))


pin_blas_threads()
