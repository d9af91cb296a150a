import shared.blas_env  # noqa: F401  (pins BLAS threads before numpy loads)
import json, time, uuid
import azure.functions as func

from shared.config import MAX_DIM_SINGLE, resolve_threshold
from shared.errors import MatrixError
from shared.log_utils import get_logger, jlog
from shared.matrix_ops import standard_multiply
from shared.shape_utils import padded_size, validate_matrices, as_matrix
from shared.strassen_module import strassen_multiply

METHODS = ("strassen", "standard")


def _json_response(body: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(body), status_code=status_code,
                             mimetype="application/json")


def _error(kind: str, message: str, status_code: int) -> func.HttpResponse:
    return _json_response({"error": kind, "message": message}, status_code)


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("router")
    run_id = uuid.uuid4().hex[:8]
    try:
        try:
            req_body = req.get_json()
        except ValueError:
            return _error("BadRequest", "Request body must be JSON", 400)
        if not isinstance(req_body, dict):
            return _error("BadRequest", "Request body must be a JSON object", 400)

        matrix_a = req_body.get("matrix_a")
        matrix_b = req_body.get("matrix_b")
        if matrix_a is None or matrix_b is None:
            return _error("BadRequest", "Both 'matrix_a' and 'matrix_b' are required", 400)
        method = str(req_body.get("method", "strassen")).lower()
        if method not in METHODS:
            return _error("BadRequest", f"'method' must be one of {list(METHODS)}", 400)
        try:
            threshold = resolve_threshold(req_body.get("threshold"))
        except ValueError as e:
            return _error("BadRequest", str(e), 400)

        # one conversion per payload; everything downstream sees ndarrays
        A = as_matrix(matrix_a)
        B = as_matrix(matrix_b)
        validate_matrices(A, B)
        if max(A.shape + B.shape) > MAX_DIM_SINGLE:
            return _error("TooLarge",
                          f"Dimensions above MAX_DIM_SINGLE={MAX_DIM_SINGLE}: A{A.shape} B{B.shape}",
                          413)

        P = padded_size(A, B)
        t0 = time.time()
        if method == "strassen":
            C = strassen_multiply(A, B, threshold=threshold, logger=logger)
        else:
            C = standard_multiply(A, B)
        t1 = time.time()

        rec = {
            "run_id": run_id, "op": "multiply", "method": method,
            "shapeA": list(A.shape), "shapeB": list(B.shape),
            "threshold": threshold, "padded_size": P, "dtype": str(C.dtype),
            "compute_sec": round(t1 - t0, 6),
        }
        jlog(logger, rec)
        return _json_response({
            "result": C.tolist(),
            "shape": list(C.shape),
            "method": method,
            "threshold": threshold,
            "padded_size": P,
            "compute_sec": rec["compute_sec"],
        })

    except MatrixError as e:
        jlog(logger, {"run_id": run_id, "op": "multiply", "success": False,
                      "error": type(e).__name__, "message": str(e)})
        return _error(type(e).__name__, str(e), 400)
    except Exception as e:
        logger.exception(f"multiply failed run={run_id}")
        return _error("InternalError", str(e), 500)
