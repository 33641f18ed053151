"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from superai.core.config.settings import LoggingSettings
from superai.core.exceptions.errors import ConfigurationError
from superai.core.logger.logger import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_handler_at_configured_level(self) -> None:
        setup_logging(LoggingSettings(level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_verbose_forces_debug(self) -> None:
        setup_logging(LoggingSettings(level="ERROR"), verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_plain_handler(self) -> None:
        setup_logging(LoggingSettings(use_rich=False))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RichHandler)

    def test_file_handler(self, temp_dir: Path) -> None:
        log_file = temp_dir / "logs" / "superai.log"
        setup_logging(LoggingSettings(file=log_file))

        get_logger("superai.test").warning("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
        setup_logging(LoggingSettings())

    def test_unwritable_log_file(self, temp_dir: Path) -> None:
        blocker = temp_dir / "not-a-dir"
        blocker.write_text("x")

        with pytest.raises(ConfigurationError, match="Cannot open log file"):
            setup_logging(LoggingSettings(file=blocker / "superai.log"))

        setup_logging(LoggingSettings())


class TestGetLogger:
    """Tests for get_logger."""

    def test_same_logger_returned(self) -> None:
        assert get_logger("superai.example") is get_logger("superai.example")
        assert get_logger("superai.example").name == "superai.example"

    def test_invalid_settings_fall_back_to_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test importing a module never fails on bad logging settings."""
        monkeypatch.setenv("SUPERAI_LOGGING_LEVEL", "LOUD")
        root = logging.getLogger()
        saved = list(root.handlers)
        root.handlers.clear()
        try:
            logger = get_logger("superai.fallback_example")

            assert logger.name == "superai.fallback_example"
            assert root.level == logging.INFO
            assert any(isinstance(h, RichHandler) for h in root.handlers)
        finally:
            root.handlers[:] = saved
