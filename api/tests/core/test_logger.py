"""Unit tests for core.logger module.

Tests the structlog-based logging configuration:
- configure_logging() installs a single stdout handler on the root logger
- LOG_LEVEL controls the root level
- LOG_FORMAT=json renders parseable JSON, including stdlib ``extra=`` fields
- Noisy third-party loggers are quieted
"""

import json
import logging

import pytest
import structlog

from core.logger import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _clean_root_logger():
    """Save and restore root logger state around each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.module",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestConfigureLogging:
    def test_installs_single_processor_handler(self, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_defaults_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_quiets_third_party_loggers(self):
        configure_logging()
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING


@pytest.mark.unit
class TestJSONOutput:
    def test_stdlib_record_is_valid_json(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        configure_logging()
        formatter = logging.getLogger().handlers[0].formatter

        parsed = json.loads(formatter.format(_record("legacy_url.redirect")))

        assert parsed["event"] == "legacy_url.redirect"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "test.module"
        assert "timestamp" in parsed

    def test_extra_fields_included(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        configure_logging()
        formatter = logging.getLogger().handlers[0].formatter

        record = _record("legacy_url.redirect", from_path="/demos", status_code=308)
        parsed = json.loads(formatter.format(record))

        assert parsed["from_path"] == "/demos"
        assert parsed["status_code"] == 308


@pytest.mark.unit
class TestGetLogger:
    def test_returns_bindable_logger(self):
        logger = get_logger("test.module")
        assert hasattr(logger, "bind")
        assert hasattr(logger, "warning")
