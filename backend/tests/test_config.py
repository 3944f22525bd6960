import pytest

from services.config import DEFAULT_PORT, load_settings


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", " secret-token ")
    for name in ("PORT", "HEALTH_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.discord_token == "secret-token"
    assert settings.health_port == DEFAULT_PORT
    assert settings.health_host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert "secret-token" not in repr(settings)


def test_load_settings_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", "t")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HEALTH_HOST", "127.0.0.1")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.health_port == 8080
    assert settings.health_host == "127.0.0.1"
    assert settings.log_level == "DEBUG"


def test_missing_token_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    with pytest.raises(RuntimeError, match="DISCORD_TOKEN"):
        load_settings()


def test_bad_port_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", "t")
    monkeypatch.setenv("PORT", "http")
    with pytest.raises(RuntimeError, match="PORT"):
        load_settings()
