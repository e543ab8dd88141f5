from __future__ import annotations

from prometheus_client import Counter, Histogram, Gauge

# --- Tutor-level metrics (low-cardinality) ---
TUTOR_ASK_TOTAL = Counter(
    "tutor_ask_total",
    "Total number of tutor questions, by outcome",
    ["outcome"],
)

TUTOR_ASK_LATENCY_SECONDS = Histogram(
    "tutor_ask_latency_seconds",
    "End-to-end latency of one tutor question",
    buckets=(0.1, 0.25, 0.5, 1, 2, 5, 10, 20, 60, 120),
)

TUTOR_HISTORY_TURNS = Histogram(
    "tutor_history_turns",
    "Number of prior turns resent with each question",
    buckets=(1, 2, 4, 8, 16, 32, 64, 128),
)

TUTOR_INFLIGHT = Gauge(
    "tutor_inflight_asks",
    "Number of tutor questions waiting on the backend",
)

# --- Backend (LLM) metrics ---
LLM_REQUESTS_TOTAL = Counter(
    "llm_requests_total",
    "Calls to the generative backend",
    ["model", "status"],
)

LLM_INFERENCE_LATENCY_SECONDS = Histogram(
    "llm_inference_latency_seconds",
    "Latency of the generateContent HTTP call",
    ["model"],
    buckets=(0.1, 0.25, 0.5, 1, 2, 5, 10, 20, 60, 120),
)

LLM_PROMPT_TOKENS_TOTAL = Counter(
    "llm_prompt_tokens_total",
    "Prompt tokens reported by the backend",
    ["model"],
)

LLM_COMPLETION_TOKENS_TOTAL = Counter(
    "llm_completion_tokens_total",
    "Completion tokens reported by the backend",
    ["model"],
)
