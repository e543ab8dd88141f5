import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import requests
from opentelemetry import trace

from .config import TutorSettings, build_settings_from_env
from .llm_client import (
    BackendAuthError,
    BackendHTTPError,
    MalformedResponseError,
    build_gemini_client,
)
from .logging import log_tutor_call
from .metrics import (
    TUTOR_ASK_TOTAL,
    TUTOR_ASK_LATENCY_SECONDS,
    TUTOR_HISTORY_TURNS,
    TUTOR_INFLIGHT,
)
from .prompt import build_contents, build_system_instruction
from .schemas import ConversationHistory, Language
from .strings import EMPTY_REPLY_TEXT, ERROR_REPLY_TEXT

tracer = trace.get_tracer("optics-tutor")


class Outcome(str, Enum):
    SUCCESS = "success"
    EMPTY_RESULT = "empty_result"
    FAILURE = "failure"


class ErrorKind(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTH = "auth"
    HTTP = "http"
    MALFORMED = "malformed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TutorReply:
    outcome: Outcome
    text: str
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None


def classify_error(exc: Exception) -> ErrorKind:
    # Timeout first: ConnectTimeout is also a ConnectionError
    if isinstance(exc, requests.Timeout):
        return ErrorKind.TIMEOUT
    if isinstance(exc, requests.ConnectionError):
        return ErrorKind.NETWORK
    if isinstance(exc, BackendAuthError):
        return ErrorKind.AUTH
    if isinstance(exc, (BackendHTTPError, requests.HTTPError)):
        return ErrorKind.HTTP
    if isinstance(exc, MalformedResponseError):
        return ErrorKind.MALFORMED
    return ErrorKind.UNKNOWN


class TutorSession:
    """
    Answers optics questions through the generative backend.

    Holds only read-only settings and a client; everything a call needs is
    rebuilt from the history passed in. ``client`` is anything with a
    ``generate(system_instruction, contents, temperature) -> str`` method.
    """

    def __init__(self, settings: TutorSettings, client=None):
        self.settings = settings
        self.client = client if client is not None else build_gemini_client(settings)

    def ask(self, query: str, history: ConversationHistory, language: Language) -> str:
        """Always returns a non-empty string; never raises."""
        return self.respond(query, history, language).text

    def respond(
        self,
        query: str,
        history: ConversationHistory,
        language: Language,
    ) -> TutorReply:
        language = Language(language)
        start = time.time()

        TUTOR_INFLIGHT.inc()
        try:
            with tracer.start_as_current_span("tutor.ask") as span:
                span.set_attribute("tutor.language", language.value)
                span.set_attribute("tutor.history_length", len(history))

                reply = self._call_backend(query, history, language)

                span.set_attribute("tutor.outcome", reply.outcome.value)
                if reply.error_kind:
                    span.set_attribute("tutor.error_kind", reply.error_kind.value)
        finally:
            TUTOR_INFLIGHT.dec()

        TUTOR_ASK_TOTAL.labels(outcome=reply.outcome.value).inc()
        TUTOR_ASK_LATENCY_SECONDS.observe(time.time() - start)
        TUTOR_HISTORY_TURNS.observe(len(history))

        log_tutor_call(
            model=self.settings.model_id,
            language=language.value,
            outcome=reply.outcome.value,
            start=start,
            history_turns=len(history),
            query_chars=len(query),
            reply_chars=len(reply.text),
            error_kind=reply.error_kind.value if reply.error_kind else None,
            error=reply.error_message,
        )
        return reply

    def build_request(
        self,
        query: str,
        history: ConversationHistory,
        language: Language,
    ) -> Dict:
        return {
            "system_instruction": build_system_instruction(language),
            "contents": build_contents(history, query),
            "temperature": self.settings.temperature,
        }

    def _call_backend(
        self,
        query: str,
        history: ConversationHistory,
        language: Language,
    ) -> TutorReply:
        try:
            request = self.build_request(query, history, language)
            text = self.client.generate(**request)
        except Exception as e:
            kind = classify_error(e)
            return TutorReply(
                outcome=Outcome.FAILURE,
                text=ERROR_REPLY_TEXT[language],
                error_kind=kind,
                error_message=f"{type(e).__name__}: {e}",
            )

        if not isinstance(text, str) or not text.strip():
            return TutorReply(outcome=Outcome.EMPTY_RESULT, text=EMPTY_REPLY_TEXT[language])

        return TutorReply(outcome=Outcome.SUCCESS, text=text)


def build_tutor_from_env() -> TutorSession:
    return TutorSession(build_settings_from_env())
