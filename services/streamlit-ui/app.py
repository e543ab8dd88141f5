import streamlit as st
import os
import logging
import json
import time
from opentelemetry import trace

from optics_tutor.chat import TutorChat
from optics_tutor.schemas import Language, Role
from optics_tutor.strings import CHAT_TITLE, INPUT_PLACEHOLDER, PAGE_CAPTION
from optics_tutor.tracing import setup_tracing
from optics_tutor.tutor import build_tutor_from_env

# -----------------------
# OpenTelemetry tracing (Streamlit root)
# -----------------------
setup_tracing(service_name=os.getenv("OTEL_SERVICE_NAME", "optics-tutor-ui"))
tracer = trace.get_tracer("streamlit-ui")

# -----------------------
# Configuration
# -----------------------
DEFAULT_LANGUAGE = Language(os.getenv("TUTOR_DEFAULT_LANGUAGE", "zh").strip().lower())

LANGUAGE_LABELS = {
    Language.ZH: "中文",
    Language.EN: "English",
}

# -----------------------
# Structured stdout logger (for Filebeat)
# -----------------------
logger = logging.getLogger("streamlit_ui")
logger.setLevel(logging.INFO)

# the page script reruns on every interaction
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)


@st.cache_resource
def get_tutor():
    # built once per process; holds the API key for the process lifetime
    return build_tutor_from_env()


# -----------------------
# Streamlit page setup
# -----------------------
st.set_page_config(page_title="Optics Lab: Bright Field vs Dark Field")

language = st.sidebar.radio(
    "Language / 语言",
    options=list(LANGUAGE_LABELS),
    index=list(LANGUAGE_LABELS).index(DEFAULT_LANGUAGE),
    format_func=LANGUAGE_LABELS.get,
)

# -----------------------
# Session initialization
# -----------------------
if "chat" not in st.session_state:
    st.session_state.chat = TutorChat(get_tutor(), language)

chat: TutorChat = st.session_state.chat
chat.select_language(language)

st.title(CHAT_TITLE[language])
st.caption(PAGE_CAPTION[language])

# -----------------------
# Render chat history
# -----------------------
for m in chat.messages:
    with st.chat_message("user" if m.role is Role.USER else "assistant"):
        st.markdown(m.text)

# -----------------------
# Chat input
# -----------------------
# TutorChat.submit ignores input while a question is in flight
prompt = st.chat_input(INPUT_PLACEHOLDER[language])

if prompt and prompt.strip():
    with tracer.start_as_current_span("ui.submit_question") as span:
        span.set_attribute("ui.framework", "streamlit")
        span.set_attribute("ui.language", language.value)
        span.set_attribute("prompt.length", len(prompt))

        with st.chat_message("user"):
            st.markdown(prompt)

        start = time.time()
        with st.chat_message("assistant"):
            with st.spinner("..."):
                answer = chat.submit(prompt)
            st.markdown(answer)

        duration_ms = round((time.time() - start) * 1000.0, 2)
        span.set_attribute("tutor.duration_ms", duration_ms)

        ui_log = {
            "service": "streamlit-ui",
            "event": "chat_submit",
            "language": language.value,
            "duration_ms": duration_ms,
            "history_length": len(chat.messages),
        }

        logger.info(json.dumps(ui_log, ensure_ascii=False))
