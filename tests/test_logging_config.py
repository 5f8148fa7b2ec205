"""Tests for structlog setup."""
import structlog

from bundlbe.logging_config import configure_logging


def test_configure_logging_json():
    configure_logging(level="INFO", json_output=True)

    structlog.get_logger("bundlbe.test").info("Configured", answer=42)

    assert structlog.is_configured()
    structlog.reset_defaults()


def test_configure_logging_console():
    configure_logging(level="debug", json_output=False)
    assert structlog.is_configured()
    structlog.reset_defaults()
