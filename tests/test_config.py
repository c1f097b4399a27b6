from __future__ import annotations

from crud_api.core import config as core_config


def test_defaults(monkeypatch):
    for var in ("APP_ENV", "DATABASE_URL", "PORT", "CORS_ORIGINS", "LOG_LEVEL", "AUTO_MIGRATE"):
        monkeypatch.delenv(var, raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.database_url == "sqlite:///banco.db"
        assert settings.port == 3000
        assert settings.cors_origins == ("*",)
        assert settings.auto_migrate is True
        assert settings.app_env == "dev"
    finally:
        core_config.get_settings.cache_clear()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:8501, http://127.0.0.1:8501")
    monkeypatch.setenv("AUTO_MIGRATE", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.port == 8080
        assert settings.cors_origins == ("http://localhost:8501", "http://127.0.0.1:8501")
        assert settings.auto_migrate is False
        assert settings.log_level == "DEBUG"
    finally:
        core_config.get_settings.cache_clear()


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    core_config.get_settings.cache_clear()
    try:
        assert core_config.get_settings().port == 3000
    finally:
        core_config.get_settings.cache_clear()
