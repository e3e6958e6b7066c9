"""Tests for WireLogger, the event catalog and logging_config."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import colorlog
import pytest

from twitchwire.logging_config import ErrorAggregator, LoggerConfigurator, log_structured_error
from twitchwire.logs import event_catalog
from twitchwire.logs.logger import SimpleFormatter, WireLogger
from twitchwire.logs.logger import logger as module_logger


@pytest.fixture
def wire_logger():
    log = WireLogger(name="twitchwire.test")
    with patch.object(log.logger, "log") as mock_log:
        yield log, mock_log


class TestWireLogger:
    def test_template_is_rendered(self, wire_logger, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        log, mock_log = wire_logger
        log.log_event("stream", "finished", count=900, errors=2)
        level, message = mock_log.call_args.args
        assert level == logging.INFO
        assert "Decoded 900 line(s), 2 error(s)" in message

    def test_missing_template_is_derived(self, wire_logger, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        log, mock_log = wire_logger
        log.log_event("some_domain", "did_thing")
        assert "some domain: did thing" in mock_log.call_args.args[1]

    def test_prefix_uses_command_and_channel(self, wire_logger, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        log, mock_log = wire_logger
        log.log_event("stream", "raw", raw="PING", command="PRIVMSG", channel="#c")
        message = mock_log.call_args.args[1]
        assert message.startswith("[PRIVMSG#c")
        assert "<< PING" in message

    def test_debug_mode_includes_context(self, wire_logger, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        log, mock_log = wire_logger
        log.log_event("stream", "finished", level=logging.DEBUG, count=3, errors=1)
        message = mock_log.call_args.args[1]
        assert message.startswith("stream_finished")
        assert "count=3" in message

    def test_bad_template_arguments_fall_back(self, wire_logger, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        log, mock_log = wire_logger
        log.log_event("stream", "finished")
        assert "{count}" in mock_log.call_args.args[1]

    def test_library_logger_only_propagates(self):
        assert module_logger.logger.propagate
        assert all(isinstance(h, logging.NullHandler) for h in module_logger.logger.handlers)

    def test_console_logger_does_not_propagate(self):
        log = WireLogger(name="twitchwire.console_test", console=True)
        try:
            assert not log.logger.propagate
            (handler,) = log.logger.handlers
            assert isinstance(handler.formatter, SimpleFormatter)
        finally:
            log.logger.handlers.clear()


class TestSimpleFormatter:
    def test_format_without_color(self):
        formatter = SimpleFormatter()
        formatter.enable_color = False
        record = logging.LogRecord("t", logging.WARNING, "", 0, "hello", (), None)
        assert formatter.format(record) == "WARNING  hello"


class TestEventCatalog:
    def test_templates_load(self):
        assert ("stream", "unknown_command") in event_catalog.EVENT_TEMPLATES
        assert ("config", "loaded") in event_catalog.EVENT_TEMPLATES

    def test_missing_file(self, tmp_path):
        templates = event_catalog._load_event_templates(tmp_path / "missing.json")
        assert templates == {("app", "load_error"): "Event templates file missing"}

    def test_reload_from_custom_file(self, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text(json.dumps({"x": {"y": "z {a}", "bad": 3}}), encoding="utf-8")
        try:
            event_catalog.reload_event_templates(path)
            assert event_catalog.EVENT_TEMPLATES == {("x", "y"): "z {a}"}
        finally:
            event_catalog.reload_event_templates()
        assert ("stream", "raw") in event_catalog.EVENT_TEMPLATES


class TestErrorAggregator:
    def test_record_and_summary(self):
        agg = ErrorAggregator()
        agg.record_error("tokenize", "bad", {"line": "x"})
        agg.record_error("tokenize", "worse")
        summary = agg.get_error_summary()
        assert summary["tokenize"]["total_count"] == 2
        assert summary["tokenize"]["last_occurrence"]["message"] == "worse"

    def test_max_per_type(self):
        agg = ErrorAggregator(max_per_type=3)
        for i in range(5):
            agg.record_error("tag", f"e{i}")
        assert [e["message"] for e in agg.errors["tag"]] == ["e2", "e3", "e4"]
        assert agg.get_error_summary()["tag"]["total_count"] == 5

    def test_should_alert(self):
        agg = ErrorAggregator()
        assert not agg.should_alert("tokenize")
        for _ in range(3):
            agg.record_error("tokenize", "x")
        assert agg.should_alert("tokenize", threshold_rate=2)
        assert not agg.should_alert("tokenize", threshold_rate=10)

    def test_should_alert_skips_summary(self):
        agg = ErrorAggregator()
        agg.record_error("tokenize", "x")
        with patch.object(agg, "get_error_summary", side_effect=AssertionError):
            assert not agg.should_alert("tokenize")
            assert not agg.should_alert("never_seen")
        assert "never_seen" not in agg.counts

    def test_reset(self):
        agg = ErrorAggregator()
        agg.record_error("tokenize", "x")
        agg.reset()
        assert agg.get_error_summary() == {}


class TestLogStructuredError:
    def test_message_layout(self, caplog):
        with caplog.at_level(logging.WARNING, logger="twitchwire"):
            log_structured_error(
                "message", "Bad record", exception=ValueError("boom"), context={"line": "x"}
            )
        assert "[MESSAGE] Bad record | Exception: ValueError: boom | Context: line=x" in caplog.text


class TestLoggerConfigurator:
    def test_formatter_is_colorlog(self):
        formatter = LoggerConfigurator().build_formatter()
        assert isinstance(formatter, colorlog.ColoredFormatter)

    def test_configure_sets_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        root = LoggerConfigurator({"report_on_exit": False}).configure()
        assert root.level == logging.DEBUG
        monkeypatch.setenv("DEBUG", "false")
        root = LoggerConfigurator({"report_on_exit": False}).configure()
        assert root.level == logging.INFO
