"""
Unit Tests for Configuration and Logging
========================================
"""

import json
import logging

import pytest
import structlog


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestClickatellConfig:
    """Tests for ClickatellConfig."""

    def test_defaults(self, monkeypatch):
        """Should fall back to defaults when the environment is empty."""
        from clickatell_sms.config import ClickatellConfig

        for name in [
            "CLICKATELL_API_ID",
            "CLICKATELL_USERNAME",
            "CLICKATELL_PASSWORD",
            "CLICKATELL_SENDER_ID",
            "CLICKATELL_BASE_URL",
            "CLICKATELL_TIMEOUT",
        ]:
            monkeypatch.delenv(name, raising=False)

        config = ClickatellConfig()

        assert config.api_id == ""
        assert config.default_sender_id is None
        assert config.base_url == "https://api.clickatell.com"
        assert config.timeout == 30.0
        assert config.max_concat == 10
        assert config.retry_attempts == 3

    def test_from_env(self, monkeypatch):
        """Should read credentials from the environment at call time."""
        from clickatell_sms.config import ClickatellConfig

        monkeypatch.setenv("CLICKATELL_API_ID", "3456789")
        monkeypatch.setenv("CLICKATELL_USERNAME", "shop")
        monkeypatch.setenv("CLICKATELL_PASSWORD", "s3cret")
        monkeypatch.setenv("CLICKATELL_SENDER_ID", "Shop")
        monkeypatch.setenv("CLICKATELL_TIMEOUT", "5")

        config = ClickatellConfig.from_env(max_concat=4)

        assert config.api_id == "3456789"
        assert config.username == "shop"
        assert config.password == "s3cret"
        assert config.default_sender_id == "Shop"
        assert config.timeout == 5.0
        assert config.max_concat == 4

    def test_empty_sender_is_none(self, monkeypatch):
        """An empty sender id variable means no default sender."""
        from clickatell_sms.config import ClickatellConfig

        monkeypatch.setenv("CLICKATELL_SENDER_ID", "")

        assert ClickatellConfig().default_sender_id is None


class TestSetupLogging:
    """Tests for structured logging setup."""

    def test_json_output(self, capsys, restore_logging):
        """Events should be rendered as JSON with the service name bound."""
        from clickatell_sms.logging_config import setup_logging

        setup_logging(service_name="sms-notifier", level="debug")
        structlog.get_logger("clickatell_sms.client").info("SMS sent", message_id="abc")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        event = json.loads(lines[-1])

        assert event["event"] == "SMS sent"
        assert event["message_id"] == "abc"
        assert event["service"] == "sms-notifier"
        assert event["level"] == "info"
        assert logging.getLogger().level == logging.DEBUG

    def test_level_filtering(self, capsys, restore_logging):
        """Events below the configured level should be dropped."""
        from clickatell_sms.logging_config import setup_logging

        setup_logging(service_name="sms-notifier", level="WARNING", json_output=False)
        capsys.readouterr()

        structlog.get_logger("clickatell_sms.client").info("SMS sent")

        assert capsys.readouterr().out == ""
