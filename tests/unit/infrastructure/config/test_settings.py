"""Unit tests for application settings."""

import pytest

from depcycle.infrastructure.config import Settings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_analysis_defaults(self, monkeypatch):
        monkeypatch.delenv("ANALYSIS_MAX_NODES", raising=False)
        monkeypatch.delenv("ANALYSIS_MAX_EDGES", raising=False)
        monkeypatch.delenv("ANALYSIS_CACHE_ENABLED", raising=False)

        settings = Settings()

        assert settings.analysis.max_nodes == 2000
        assert settings.analysis.max_edges == 20000
        assert settings.analysis.cache_enabled is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_MAX_NODES", "50")
        monkeypatch.setenv("ANALYSIS_CACHE_ENABLED", "false")
        monkeypatch.setenv("OTEL_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.analysis.max_nodes == 50
        assert settings.analysis.cache_enabled is False
        assert settings.observability.log_level == "DEBUG"

    def test_tracing_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("OTEL_TRACING_ENABLED", raising=False)

        assert Settings().observability.tracing_enabled is False

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reset_settings_reloads(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_MAX_EDGES", "10")
        first = get_settings()

        monkeypatch.setenv("ANALYSIS_MAX_EDGES", "20")
        reset_settings()

        assert get_settings() is not first
        assert get_settings().analysis.max_edges == 20
