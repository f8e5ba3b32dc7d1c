"""
Tests for structured logging configuration
"""

import json
import sys
import logging
import pytest

from mybank.config import BankConfig
from mybank.logging_config import (
    JSONFormatter, setup_logging, setup_logging_from_config, get_logger, log_action
)


@pytest.fixture
def logger_name(request):
    name = f"mybank.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


class TestJSONFormatter:
    """Test JSON log formatting"""

    def test_formats_structured_fields(self):
        record = logging.LogRecord("mybank.accounts", logging.INFO, __file__, 1, "deposit of 5 RON", (), None)
        record.account_id = "acc-1"
        record.action = "deposit"
        record.extra = {"amount": "5"}

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "mybank.accounts"
        assert entry["message"] == "deposit of 5 RON"
        assert entry["account_id"] == "acc-1"
        assert entry["action"] == "deposit"
        assert entry["extra"] == {"amount": "5"}
        assert "resource" not in entry

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in entry["exception"]


class TestSetupLogging:
    """Test logger setup helpers"""

    def test_json_handler(self, logger_name):
        logger = setup_logging("DEBUG", logger_name)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_text_handler(self, logger_name):
        logger = setup_logging("WARNING", logger_name, log_format="text")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_duplicate(self, logger_name):
        setup_logging("INFO", logger_name)
        logger = setup_logging("INFO", logger_name)

        assert len(logger.handlers) == 1

    def test_setup_from_config(self):
        logger = setup_logging_from_config(BankConfig(log_level="error", log_format="text"))
        try:
            assert logger.name == "mybank"
            assert logger.level == logging.ERROR
        finally:
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    def test_get_logger(self):
        assert get_logger("mybank.accounts") is logging.getLogger("mybank.accounts")


class TestLogAction:
    """Test structured action logging"""

    def test_attaches_fields(self, caplog):
        logger = logging.getLogger("mybank.test.log_action")

        with caplog.at_level(logging.INFO, logger="mybank.test.log_action"):
            log_action(logger, "info", "withdraw of 20 EUR", account_id="acc-3",
                       action="withdraw", resource="account", extra={"amount": "20"})

        record = caplog.records[-1]
        assert record.levelname == "INFO"
        assert record.account_id == "acc-3"
        assert record.action == "withdraw"
        assert record.resource == "account"
        assert record.extra == {"amount": "20"}

    def test_respects_level(self, caplog):
        logger = logging.getLogger("mybank.test.log_action_level")

        with caplog.at_level(logging.WARNING, logger="mybank.test.log_action_level"):
            log_action(logger, "info", "ignored")

        assert caplog.records == []
