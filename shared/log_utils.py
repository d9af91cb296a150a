import json, time, logging

from shared.config import LOG_LEVEL


def get_logger(name: str = "strassen") -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        lg.addHandler(h)
        lg.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return lg


def jlog(logger: logging.Logger, rec: dict) -> str:
    """Emit one structured JSON line (picked up by App Insights from stdout)."""
    base = {"ts": time.time()}
    base.update(rec)
    base.setdefault("success", True)
    line = json.dumps(base, ensure_ascii=False)
    logger.info(line)
    return line
