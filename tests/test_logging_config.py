"""
Test suite for logging configuration module

Tests JSON formatting, logger setup and structured action logging.
"""

import json
import logging

from simple_bank import config as config_module
from simple_bank.config import BankConfig
from simple_bank.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestJSONFormatter:
    """Test JSONFormatter output"""

    def test_format_includes_structured_fields(self):
        """Test action, resource and extra are serialized"""
        record = logging.LogRecord("simple_bank.test", logging.INFO, __file__, 1,
                                   "Deposit posted", (), None)
        record.action = "deposit"
        record.resource = "ABCD1234"
        record.extra = {"amount": "10"}

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "Deposit posted"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "ABCD1234"
        assert entry["extra"] == {"amount": "10"}
        assert "timestamp" in entry

    def test_format_drops_missing_fields(self):
        """Test unset structured fields are omitted"""
        record = logging.LogRecord("simple_bank.test", logging.WARNING, __file__, 1,
                                   "plain", (), None)

        entry = json.loads(JSONFormatter().format(record))

        assert "action" not in entry
        assert "resource" not in entry
        assert "extra" not in entry


class TestSetupLogging:
    """Test logger setup"""

    def test_setup_json(self):
        """Test setup installs a single JSON handler"""
        logger = setup_logging("DEBUG", logger_name="simple_bank.test_json")
        setup_logging("DEBUG", logger_name="simple_bank.test_json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_text(self):
        """Test text format uses a plain formatter"""
        logger = setup_logging("warning", logger_name="simple_bank.test_text", log_format="text")

        assert logger.level == logging.WARNING
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_defaults_from_config(self, monkeypatch):
        """Test level and format fall back to the configuration"""
        monkeypatch.setattr(config_module, "config", BankConfig(log_level="ERROR", log_format="text"))

        logger = setup_logging(logger_name="simple_bank.test_config")

        assert logger.level == logging.ERROR
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_get_logger(self):
        """Test get_logger returns the named logger"""
        assert get_logger("simple_bank.x") is logging.getLogger("simple_bank.x")


class TestLogAction:
    """Test structured action logging"""

    def test_log_action_attaches_fields(self, caplog):
        """Test fields are attached to the emitted record"""
        caplog.set_level(logging.INFO, logger="simple_bank.actions")
        logger = logging.getLogger("simple_bank.actions")

        log_action(logger, "info", "Account opened", action="open_account",
                   resource="ABCD1234", extra={"account_type": "basic"})

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.getMessage() == "Account opened"
        assert record.action == "open_account"
        assert record.resource == "ABCD1234"
        assert record.extra == {"account_type": "basic"}

    def test_log_action_respects_level(self, caplog):
        """Test records below the logger level are not emitted"""
        caplog.set_level(logging.WARNING, logger="simple_bank.quiet")
        logger = logging.getLogger("simple_bank.quiet")

        log_action(logger, "info", "ignored", action="deposit")

        assert caplog.records == []


class TestPackageExports:
    """Test logging setup is part of the package surface"""

    def test_setup_logging_exported(self):
        """Test the package root exposes the logging helpers"""
        import simple_bank
        from simple_bank import logging_config

        assert simple_bank.setup_logging is logging_config.setup_logging
        assert simple_bank.get_logger is logging_config.get_logger
        assert "setup_logging" in simple_bank.__all__
