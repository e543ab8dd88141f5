from optics_tutor.config import DEFAULT_BASE_URL, MODEL_ID, build_settings_from_env


def test_settings_defaults(monkeypatch):
    for var in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_BASE_URL", "TUTOR_TIMEOUT_S"):
        monkeypatch.delenv(var, raising=False)

    settings = build_settings_from_env()

    assert settings.api_key == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.model_id == MODEL_ID == "gemini-2.5-flash"
    assert settings.temperature == 0.7
    assert settings.timeout_s is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", " secret ")
    monkeypatch.setenv("GEMINI_BASE_URL", "http://proxy.local/")
    monkeypatch.setenv("TUTOR_TIMEOUT_S", "30")

    settings = build_settings_from_env()

    assert settings.api_key == "secret"
    assert settings.base_url == "http://proxy.local"
    assert settings.timeout_s == 30.0


def test_google_api_key_fallback(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "g-key")

    assert build_settings_from_env().api_key == "g-key"
