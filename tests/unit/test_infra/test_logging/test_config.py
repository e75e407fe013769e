"""Tests for logging configuration."""

import logging

import pytest

from object_gateway.infra.logging import build_logging_config, configure_logging


@pytest.mark.unit
class TestBuildLoggingConfig:
    def test_json_formatter(self):
        config = build_logging_config(
            log_level="info",
            json_logs=True,
            service_name="object-gateway",
            include_uvicorn=True,
        )

        formatter = config["formatters"]["default"]
        assert formatter["()"].endswith("JSONFormatter")
        assert formatter["static"] == {"service": "object-gateway"}
        assert config["root"] == {"level": "INFO", "handlers": ["console"]}

    def test_text_formatter(self):
        config = build_logging_config(
            log_level="DEBUG",
            json_logs=False,
            service_name="object-gateway",
            include_uvicorn=False,
        )

        assert "format" in config["formatters"]["default"]
        assert "loggers" not in config

    def test_uvicorn_loggers_propagate_to_root(self):
        config = build_logging_config(
            log_level="INFO",
            json_logs=True,
            service_name="object-gateway",
            include_uvicorn=True,
        )

        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            assert config["loggers"][name] == {"handlers": [], "propagate": True}


@pytest.mark.unit
def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        configure_logging(log_level="WARNING", json_logs=False, capture_warnings=False)

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
