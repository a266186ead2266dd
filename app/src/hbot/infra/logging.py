import logging
import time
from typing import Any, Dict

logger = logging.getLogger("hbot")

_LOG_START_TIME = time.time()

def _fmt_val(v: Any) -> str:
    if v is None:
        return "-"
    if isinstance(v, (int, float)):
        return str(v)
    s = str(v)
    if any(ch in s for ch in [' ', '=', '\n', '\t']):
        s = s.replace('\n', '↵')[:400]
        return f'"{s}"'
    return s[:400]

def format_event(event: str, **fields: Any) -> str:
    uptime = time.time() - _LOG_START_TIME
    base: Dict[str, Any] = {"event": event, "uptime_s": f"{uptime:.1f}"}
    base.update(fields)
    return ' '.join(f"{k}={_fmt_val(v)}" for k, v in base.items())

def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Structured event logging.
    Format: key=value space separated single line for easy grep & ingestion.
    Automatically injects uptime_s since process start.
    """
    logger.log(level, format_event(event, **fields))

__all__ = ["logger", "log_event", "format_event"]
