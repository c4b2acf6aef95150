"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "boxlayout"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET

    @pytest.mark.unit
    def test_setup_logging_reads_environment(self, monkeypatch) -> None:
        """Level falls back to BOXLAYOUT_LOG_LEVEL when omitted."""
        monkeypatch.setenv("BOXLAYOUT_LOG_LEVEL", "DEBUG")
        calls = {}
        monkeypatch.setattr(
            logging, "basicConfig", lambda **kwargs: calls.update(kwargs)
        )
        setup_logging()
        assert calls["level"] == logging.DEBUG
