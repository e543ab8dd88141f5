import time
from typing import Dict, List, Optional

import requests
from opentelemetry import trace

from .config import API_VERSION, TutorSettings
from .metrics import (
    LLM_REQUESTS_TOTAL,
    LLM_INFERENCE_LATENCY_SECONDS,
    LLM_PROMPT_TOKENS_TOTAL,
    LLM_COMPLETION_TOKENS_TOTAL,
)

tracer = trace.get_tracer("optics-tutor")


class BackendError(Exception):
    """The backend answered, but not with something we can use."""


class BackendAuthError(BackendError):
    pass


class BackendHTTPError(BackendError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Backend returned HTTP {status_code}: {body[:300]}")
        self.status_code = status_code


class MalformedResponseError(BackendError):
    pass


class GeminiClient:
    """
    Client for the Gemini ``generateContent`` REST endpoint.

    One HTTP request per call, no retries. Transport failures from
    ``requests`` (timeouts, connection errors) propagate unchanged; HTTP and
    payload problems are raised as ``BackendError`` subclasses.
    """

    def __init__(
        self,
        base_url: str,
        model_id: str,
        api_key: str,
        timeout_s: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model_id = model_id
        self.api_key = api_key
        self.timeout_s = timeout_s

    @property
    def url(self) -> str:
        return f"{self.base_url}/{API_VERSION}/models/{self.model_id}:generateContent"

    def generate(
        self,
        system_instruction: str,
        contents: List[Dict],
        temperature: float,
    ) -> str:
        """
        Return the reply text, or "" when the backend produced no text.
        """

        payload = {
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "contents": contents,
            "generationConfig": {"temperature": temperature},
        }

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        with tracer.start_as_current_span("llm.generate_content") as span:
            span.set_attribute("llm.model", self.model_id)
            span.set_attribute("llm.turns", len(contents))

            try:
                start = time.time()
                r = requests.post(
                    self.url,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout_s,
                )
                LLM_INFERENCE_LATENCY_SECONDS.labels(model=self.model_id).observe(
                    time.time() - start
                )

                _raise_for_status(r)
                text = self._extract_text(r)
            except Exception:
                LLM_REQUESTS_TOTAL.labels(model=self.model_id, status="error").inc()
                raise

            LLM_REQUESTS_TOTAL.labels(
                model=self.model_id,
                status="success" if text else "empty",
            ).inc()
            span.set_attribute("llm.reply_chars", len(text))
            return text

    def _extract_text(self, r: requests.Response) -> str:
        try:
            data = r.json()
        except ValueError as e:
            raise MalformedResponseError(f"Backend response is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResponseError("Backend response is not a JSON object")

        usage = data.get("usageMetadata")
        if isinstance(usage, dict):
            prompt_tokens = int(usage.get("promptTokenCount", 0) or 0)
            completion_tokens = int(usage.get("candidatesTokenCount", 0) or 0)
            if prompt_tokens:
                LLM_PROMPT_TOKENS_TOTAL.labels(model=self.model_id).inc(prompt_tokens)
            if completion_tokens:
                LLM_COMPLETION_TOKENS_TOTAL.labels(model=self.model_id).inc(completion_tokens)

        candidates = data.get("candidates")
        if candidates is None:
            # e.g. prompt blocked upstream: a valid answer with no text
            return ""
        if not isinstance(candidates, list):
            raise MalformedResponseError("'candidates' is not a list")
        if not candidates:
            return ""

        first = candidates[0]
        if not isinstance(first, dict):
            raise MalformedResponseError("candidate is not an object")

        content = first.get("content") or {}
        if not isinstance(content, dict):
            raise MalformedResponseError("'content' is not an object")

        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise MalformedResponseError("'parts' is not a list")

        return "".join(
            p.get("text") or "" for p in parts if isinstance(p, dict)
        )


def _raise_for_status(r: requests.Response) -> None:
    if r.ok:
        return

    body = r.text or ""
    # Gemini rejects bad keys with 400 API_KEY_INVALID rather than 401
    if r.status_code in (401, 403) or (
        r.status_code == 400 and "API_KEY_INVALID" in body
    ):
        raise BackendAuthError(f"Backend rejected the API key (HTTP {r.status_code})")

    raise BackendHTTPError(r.status_code, body)


def build_gemini_client(settings: TutorSettings) -> GeminiClient:
    return GeminiClient(
        base_url=settings.base_url,
        model_id=settings.model_id,
        api_key=settings.api_key,
        timeout_s=settings.timeout_s,
    )
