"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from envkit.log import LoggerMixin, get_logger, level_from_env, setup_logging


@pytest.fixture
def logger_name(request: pytest.FixtureRequest):
    """Give each test its own logger and close its handlers afterwards."""
    name = f"envkit-test-{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestLevelFromEnv:
    """Verify log level resolution from the environment."""

    def test_unset_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No variable should mean the default level."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert level_from_env() == logging.INFO
        assert level_from_env(default=logging.ERROR) == logging.ERROR

    def test_level_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Level names should be case-insensitive."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert level_from_env() == logging.DEBUG

    def test_level_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Numeric levels should be used as is."""
        monkeypatch.setenv("LOG_LEVEL", "30")
        assert level_from_env() == logging.WARNING

    def test_unknown_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An unknown name should fall back to the default."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert level_from_env() == logging.INFO

    def test_custom_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Another variable name can be used."""
        monkeypatch.setenv("APP_LOG_LEVEL", "ERROR")
        assert level_from_env("APP_LOG_LEVEL") == logging.ERROR


class TestSetupLogging:
    """Verify handler configuration."""

    def test_console_only(self, logger_name: str) -> None:
        """Without a file, only the console handler should be attached."""
        logger = setup_logging(logger_name, level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_repeat_setup_does_not_duplicate(self, logger_name: str) -> None:
        """Calling setup twice should not stack handlers."""
        setup_logging(logger_name, level=logging.INFO)
        logger = setup_logging(logger_name, level=logging.INFO)
        assert len(logger.handlers) == 1

    def test_file_handler(self, logger_name: str, tmp_path: Path) -> None:
        """A log file should get a DEBUG handler and receive records."""
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logging(logger_name, log_file=log_file, level=logging.INFO)
        assert len(logger.handlers) == 2

        logger.debug("detail")
        for handler in logger.handlers:
            handler.flush()
        assert "detail" in log_file.read_text()

    def test_level_from_environment(self, logger_name: str, monkeypatch: pytest.MonkeyPatch) -> None:
        """With no level given, LOG_LEVEL should set the console level."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger = setup_logging(logger_name)
        assert logger.handlers[0].level == logging.ERROR

    def test_get_logger(self, logger_name: str) -> None:
        """get_logger should return the same named logger."""
        assert get_logger(logger_name) is setup_logging(logger_name, level=logging.INFO)


class TestLoggerMixin:
    """Verify the logging mixin."""

    def test_default_logger(self) -> None:
        """Without setup, the logger should be named after the class."""

        class Service(LoggerMixin):
            pass

        assert Service().logger.name == "Service"

    def test_setup_logger(self, logger_name: str) -> None:
        """setup_logger should attach a configured logger."""

        class Service(LoggerMixin):
            pass

        service = Service()
        service.setup_logger(logger_name, level=logging.INFO)
        assert service.logger.name == logger_name
        assert len(service.logger.handlers) == 1
