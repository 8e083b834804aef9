"""Tests for environment-driven configuration."""

import pytest

from chatbff.config import Config
from chatbff.main import check_startup_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ALLOWED_DOMAINS", "RAG_API_URL", "RAG_API_KEY", "PORT", "ENVIRONMENT", "FRONTEND_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    def test_defaults(self, clean_env):
        config = Config(_env_file=None)
        assert config.allowed_domains == ["example.com"]
        assert config.rag_api_url == "http://localhost:8080"
        assert config.rag_api_key == ""
        assert config.port == 3000
        assert config.frontend_url == "http://localhost:5173"
        assert config.session_ttl_seconds == 7 * 24 * 60 * 60
        assert config.session_sweep_interval_seconds == 60 * 60

    def test_allowed_domains_comma_separated(self, clean_env):
        clean_env.setenv("ALLOWED_DOMAINS", "example.com, Corp.io ,,other.org")
        assert Config(_env_file=None).allowed_domains == ["example.com", "Corp.io", "other.org"]

    def test_env_values(self, clean_env):
        clean_env.setenv("RAG_API_URL", "http://rag:9000")
        clean_env.setenv("RAG_API_KEY", "k")
        clean_env.setenv("PORT", "8081")
        config = Config(_env_file=None)
        assert config.rag_api_url == "http://rag:9000"
        assert config.rag_api_key == "k"
        assert config.port == 8081


class TestStartupCheck:
    def test_production_without_key_exits(self, clean_env):
        config = Config(_env_file=None, environment="production", rag_api_key="")
        with pytest.raises(SystemExit) as exc_info:
            check_startup_config(config)
        assert exc_info.value.code == 1

    def test_production_with_key(self, clean_env):
        check_startup_config(Config(_env_file=None, environment="Production", rag_api_key="secret"))

    def test_development_without_key(self, clean_env):
        check_startup_config(Config(_env_file=None, environment="development", rag_api_key=""))
