import shared.blas_env  # noqa: F401  (pins BLAS threads before numpy loads)
import json, sys
import azure.functions as func

from shared.log_utils import get_logger


def main(req: func.HttpRequest) -> func.HttpResponse:
    try:
        import numpy as np
        from shared.config import resolve_dtype, resolve_threshold, resolve_workers
        payload = {
            "ok": True,
            "python": sys.version,
            "numpy_version": np.__version__,
            "threshold": resolve_threshold(),
            "dtype": str(resolve_dtype()),
            "workers": resolve_workers(),
        }
        return func.HttpResponse(json.dumps(payload), mimetype="application/json")
    except Exception as e:
        get_logger("check_env").warning(f"check_env failed: {e!r}")
        return func.HttpResponse(
            json.dumps({"ok": False, "error": repr(e)}),
            status_code=500,
            mimetype="application/json",
        )
