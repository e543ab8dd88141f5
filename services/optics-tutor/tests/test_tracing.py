from optics_tutor import tracing


class FakeInstrumentor:
    calls = 0

    def instrument(self):
        FakeInstrumentor.calls += 1


def test_setup_tracing_configures_once(monkeypatch):
    providers = []
    FakeInstrumentor.calls = 0

    monkeypatch.setenv("OTEL_SPAN_PROCESSOR", "simple")
    monkeypatch.setattr(tracing, "_configured", False)
    monkeypatch.setattr(tracing, "RequestsInstrumentor", FakeInstrumentor)
    monkeypatch.setattr(tracing.trace, "set_tracer_provider", providers.append)

    tracing.setup_tracing(service_name="optics-tutor-test")
    tracing.setup_tracing(service_name="optics-tutor-test")

    assert len(providers) == 1
    assert providers[0].resource.attributes["service.name"] == "optics-tutor-test"
    assert FakeInstrumentor.calls == 1
