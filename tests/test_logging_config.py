"""Tests for logging configuration and formatters."""

import io
import json
import logging

import pytest

from project_matcher.logging import ComponentLoggerAdapter, get_logger
from project_matcher.logging.config import (
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from project_matcher.logging.context import log_context


@pytest.fixture
def logger():
    """Create a test logger with no handlers."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()
    yield test_logger
    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way configure_logging found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(logger, message="Test message", extra=None):
    return logger.makeRecord(
        "project_matcher.test", logging.INFO, "test.py", 1, message, (), None, extra=extra
    )


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_mandatory_fields(self, logger):
        log_obj = json.loads(JSONFormatter().format(make_record(logger)))

        assert log_obj["level"] == "INFO"
        assert log_obj["message"] == "Test message"
        assert log_obj["logger"] == "project_matcher.test"
        assert log_obj["timestamp"].endswith("Z")
        assert len(log_obj["timestamp"]) == 24

    def test_extra_fields(self, logger):
        record = make_record(
            logger, extra={"event": "matching.rank.completed", "matches": 2, "flag": True}
        )
        log_obj = json.loads(JSONFormatter().format(record))

        assert log_obj["event"] == "matching.rank.completed"
        assert log_obj["matches"] == 2
        assert log_obj["flag"] is True
        assert "name" not in log_obj

    def test_non_serializable_extra_stringified(self, logger):
        record = make_record(logger, extra={"signals": {"code"}})
        log_obj = json.loads(JSONFormatter().format(record))
        assert log_obj["signals"] == "{'code'}"

    def test_with_context(self, logger):
        filter_ = ContextualFilter(service="project-matcher", environment="test")

        with log_context(email_subject="RE: Permit"):
            record = make_record(logger, extra={"event": "cli.suggest.completed"})
            filter_.filter(record)

        log_obj = json.loads(JSONFormatter().format(record))
        assert log_obj["service"] == "project-matcher"
        assert log_obj["environment"] == "test"
        assert log_obj["email_subject"] == "RE: Permit"
        assert log_obj["event"] == "cli.suggest.completed"


class TestKeyValueFormatter:
    """Tests for KeyValueFormatter."""

    @pytest.fixture
    def formatter(self):
        return KeyValueFormatter("[%(levelname)s] %(name)s: %(message)s")

    def test_basic(self, logger, formatter):
        output = formatter.format(make_record(logger))
        assert output == "[INFO] project_matcher.test: Test message"

    def test_extras_sorted_and_formatted(self, logger, formatter):
        record = make_record(
            logger,
            extra={"matches": 3, "event": "matching.rank.completed", "empty": None, "ok": False},
        )
        output = formatter.format(record)
        assert output.endswith("empty=null event=matching.rank.completed matches=3 ok=false")

    def test_quotes_strings_with_spaces(self, logger, formatter):
        record = make_record(logger, extra={"email_subject": "RE: Permit, job 1"})
        assert 'email_subject="RE: Permit, job 1"' in formatter.format(record)

    def test_skips_static_fields(self, logger, formatter):
        record = make_record(logger)
        ContextualFilter().filter(record)
        output = formatter.format(record)
        assert "service=" not in output
        assert "environment=" not in output


class TestContextualFilter:
    """Tests for ContextualFilter."""

    def test_static_fields(self, logger):
        record = make_record(logger)
        assert ContextualFilter(service="svc", environment="staging").filter(record) is True
        assert record.service == "svc"
        assert record.environment == "staging"

    def test_explicit_extra_wins_over_context(self, logger):
        with log_context(component="context"):
            record = make_record(logger, extra={"component": "explicit"})
            ContextualFilter().filter(record)
        assert record.component == "explicit"


class TestGetLogger:
    """Tests for get_logger and ComponentLoggerAdapter."""

    def test_plain_logger(self):
        assert isinstance(get_logger("project_matcher.x"), logging.Logger)

    def test_component_adapter_merges_extra(self, caplog):
        adapter = get_logger("project_matcher.y", component="matching")
        assert isinstance(adapter, ComponentLoggerAdapter)

        with caplog.at_level(logging.INFO, logger="project_matcher.y"):
            adapter.info("hello", extra={"event": "test.event"})

        record = caplog.records[-1]
        assert record.component == "matching"
        assert record.event == "test.event"

    def test_call_extra_overrides_component(self, caplog):
        adapter = get_logger("project_matcher.z", component="matching")
        with caplog.at_level(logging.INFO, logger="project_matcher.z"):
            adapter.info("hello", extra={"component": "override"})
        assert caplog.records[-1].component == "override"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_invalid_level(self, restore_root_logger):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="INVALID")

    def test_invalid_format(self, restore_root_logger):
        with pytest.raises(ValueError, match="Invalid log format"):
            configure_logging(format_type="xml")

    def test_json_format(self, restore_root_logger):
        configure_logging(level="DEBUG", format_type="json", environment="test")

        handler = restore_root_logger.handlers[0]
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(handler.formatter, JSONFormatter)
        assert restore_root_logger.level == logging.DEBUG

    def test_key_value_format(self, restore_root_logger):
        configure_logging(level="warning", format_type="key-value")

        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, KeyValueFormatter)
        assert restore_root_logger.level == logging.WARNING

    def test_writes_to_stream(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="INFO", format_type="json", environment="ci", stream=stream)

        logging.getLogger("project_matcher.stream").info(
            "Ranked", extra={"event": "matching.rank.completed"}
        )

        log_obj = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert log_obj["message"] == "Ranked"
        assert log_obj["environment"] == "ci"
        assert log_obj["service"] == "project-matcher"
