import os
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.requests import RequestsInstrumentor


_configured = False


def setup_tracing(service_name: Optional[str] = None) -> None:
    """
    Export tutor spans over OTLP HTTP and trace the outbound Gemini calls.

    Safe to call on every Streamlit rerun; only the first call configures.
    """
    global _configured
    if _configured:
        return

    name = service_name or os.getenv("OTEL_SERVICE_NAME", "optics-tutor")
    provider = TracerProvider(
        resource=Resource.create({"service.name": name, "service.namespace": "optics-lab"})
    )

    exporter = OTLPSpanExporter(
        endpoint=os.getenv("OTEL_EXPORTER_OTLP_HTTP_ENDPOINT", "http://localhost:4318/v1/traces")
    )
    # simple export is handy locally, batch otherwise
    if os.getenv("OTEL_SPAN_PROCESSOR", "batch").strip().lower() == "simple":
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    else:
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    RequestsInstrumentor().instrument()

    _configured = True
