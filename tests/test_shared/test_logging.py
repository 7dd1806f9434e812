"""
Tests for configure_logging.
"""

import logging
import os
from unittest.mock import MagicMock, patch

import pytest
import structlog

from src.shared.config import AuthSettings
from src.shared.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_sets_root_level(self, clean_env):
        configure_logging(AuthSettings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_json_renderer_by_default(self, clean_env):
        configure_logging(AuthSettings())
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self, clean_env):
        configure_logging(AuthSettings(log_format="console"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_merges_context_vars(self, clean_env):
        configure_logging(AuthSettings())
        processors = structlog.get_config()["processors"]
        assert structlog.contextvars.merge_contextvars in processors

    def test_reads_environment_when_no_settings(self, clean_env):
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR", "LOG_FORMAT": "console"}):
            configure_logging()
        assert logging.getLogger().level == logging.ERROR
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    @pytest.mark.parametrize(
        "log_level, expected",
        [("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("verbose", logging.INFO)],
    )
    def test_explicit_level_normalized(self, clean_env, log_level, expected):
        configure_logging(AuthSettings(log_level=log_level))
        assert logging.getLogger().level == expected


class TestFallbackWarnings:
    """Tests for reporting invalid LOG_LEVEL/LOG_FORMAT values."""

    def test_invalid_env_reported_when_reading_environment(self, clean_env):
        mock_logger = MagicMock()
        with (
            patch.dict(os.environ, {"LOG_LEVEL": "verbose", "LOG_FORMAT": "xml"}),
            patch("src.shared.logging.structlog.get_logger", return_value=mock_logger),
        ):
            configure_logging()

        events = [call.args[0] for call in mock_logger.warning.call_args_list]
        assert events == [
            "Invalid LOG_LEVEL, using default",
            "Invalid LOG_FORMAT, using default",
        ]

    def test_env_ignored_with_explicit_settings(self, clean_env):
        """A stray LOG_LEVEL does not produce a warning for settings passed in."""
        mock_logger = MagicMock()
        with (
            patch.dict(os.environ, {"LOG_LEVEL": "verbose"}),
            patch("src.shared.logging.structlog.get_logger", return_value=mock_logger),
        ):
            configure_logging(AuthSettings(log_level="DEBUG"))

        mock_logger.warning.assert_not_called()
        assert logging.getLogger().level == logging.DEBUG
