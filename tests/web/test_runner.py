"""Tests for the uvicorn runner configuration."""

import copy

import uvicorn
from fastapi import FastAPI
from uvicorn.config import LOGGING_CONFIG

from chatbff.web.runner import ACCESS_FORMAT, DEFAULT_FORMAT, build_log_config, run_server


class TestLogConfig:
    def test_service_formats(self):
        log_config = build_log_config(debug=False)

        assert log_config["formatters"]["access"]["fmt"] == ACCESS_FORMAT
        assert log_config["formatters"]["default"]["fmt"] == DEFAULT_FORMAT
        assert log_config["loggers"]["uvicorn"]["level"] == "INFO"

    def test_debug_level(self):
        log_config = build_log_config(debug=True)
        assert log_config["loggers"]["uvicorn"]["level"] == "DEBUG"

    def test_uvicorn_defaults_not_mutated(self):
        """Building the config twice leaves uvicorn's module-level LOGGING_CONFIG as it was."""
        before = copy.deepcopy(LOGGING_CONFIG)

        build_log_config(debug=True)
        build_log_config(debug=False)

        assert before == LOGGING_CONFIG


class TestRunServer:
    def test_passes_app_and_config_to_uvicorn(self, monkeypatch, app_instance, config):
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        before = copy.deepcopy(LOGGING_CONFIG)

        run_server(app_instance, config)

        assert len(calls) == 1
        fastapi_app, kwargs = calls[0]
        assert isinstance(fastapi_app, FastAPI)
        assert kwargs["host"] == config.host
        assert kwargs["port"] == config.port
        assert kwargs["access_log"] is True
        assert kwargs["log_config"]["formatters"]["access"]["fmt"] == ACCESS_FORMAT
        assert kwargs["log_config"] is not LOGGING_CONFIG
        assert before == LOGGING_CONFIG
