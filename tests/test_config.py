from skyview.config import DEFAULT_API_BASE_URL, Settings, get_settings, reset_settings


def test_defaults_without_environment(monkeypatch):
    for name in ("SKYVIEW_API_BASE_URL", "SKYVIEW_API_KEY", "SKYVIEW_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.api_key == ""
    assert settings.timeout == 10.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SKYVIEW_API_BASE_URL", "https://proxy.test/owm/")
    monkeypatch.setenv("SKYVIEW_API_KEY", "abc123")
    monkeypatch.setenv("SKYVIEW_TIMEOUT", "2.5")
    reset_settings()
    try:
        settings = get_settings()
        assert settings.api_base_url == "https://proxy.test/owm"
        assert settings.api_key == "abc123"
        assert settings.timeout == 2.5
        assert get_settings() is settings
    finally:
        reset_settings()
