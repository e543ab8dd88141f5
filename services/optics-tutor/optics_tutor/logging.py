import json
import logging
import time
from typing import Any, Dict, Optional

logger = logging.getLogger("optics_tutor")
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
# One JSON object per line so log shippers can parse it
_handler.setFormatter(logging.Formatter("%(message)s"))
logger.addHandler(_handler)


def log_tutor_call(
    *,
    model: str,
    language: str,
    outcome: str,
    start: float,
    history_turns: int,
    query_chars: int,
    reply_chars: int,
    error_kind: Optional[str] = None,
    error: Optional[str] = None,
) -> None:
    """
    Structured JSON record for one tutor question.

    Failures are logged at ERROR with the underlying cause; that cause never
    reaches the caller of ``TutorSession.ask``.
    """
    now = time.time()

    payload: Dict[str, Any] = {
        "service": "optics-tutor",
        "event": "tutor_ask",
        "timestamp": now,
        "model": model,
        "language": language,
        "outcome": outcome,
        "duration_ms": round((now - start) * 1000.0, 2),
        "history_turns": history_turns,
        "query_chars": query_chars,
        "reply_chars": reply_chars,
        "error_kind": error_kind,
        "error": error,
    }

    line = json.dumps(payload, ensure_ascii=False)
    if error_kind:
        logger.error(line)
    else:
        logger.info(line)
