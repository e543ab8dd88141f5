import os
from dataclasses import dataclass
from typing import Optional

MODEL_ID = "gemini-2.5-flash"
TEMPERATURE = 0.7
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
API_VERSION = "v1beta"


@dataclass(frozen=True)
class TutorSettings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    model_id: str = MODEL_ID
    temperature: float = TEMPERATURE
    timeout_s: Optional[float] = None


def build_settings_from_env() -> TutorSettings:
    """
    Read tutor configuration once at startup.

    A missing API key is not an error here; the backend rejects the call
    and the tutor answers with its error fallback.
    """

    api_key = (
        os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""
    ).strip()

    base_url = (os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL).strip()

    raw_timeout = (os.getenv("TUTOR_TIMEOUT_S") or "").strip()
    timeout_s = float(raw_timeout) if raw_timeout else None

    return TutorSettings(
        api_key=api_key,
        base_url=base_url.rstrip("/"),
        timeout_s=timeout_s,
    )
