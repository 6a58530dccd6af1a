"""Python logging setup with dual output (terminal + file).

Features:
- Levels: DEBUG, INFO, WARNING, ERROR
- Output: Terminal + optional .log file
- Level can come from the LOG_LEVEL environment variable
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from envkit.config.env import EnvKeys, get_env


def level_from_env(key: str = EnvKeys.LOG_LEVEL, default: int = logging.INFO) -> int:
    """
    Resolve a log level from an environment variable.

    Accepts level names ("debug", "WARNING") or numbers ("10").

    Args:
        key: Environment variable name.
        default: Level used when the variable is unset or unrecognized.

    Returns:
        Numeric log level.
    """
    value = get_env(key)
    if value is None:
        return default

    value = value.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def setup_logging(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Optional[int] = None,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
) -> logging.Logger:
    """
    Set up logging with console and file handlers.

    Args:
        name: Logger name (typically the application name).
        log_file: Path for the file handler. No file output if None.
        level: Default log level. Defaults to level_from_env().
        console_level: Console handler level (defaults to level).
        file_level: File handler level (defaults to DEBUG for verbose file logs).

    Returns:
        Configured logger instance.
    """
    if level is None:
        level = level_from_env()

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level or level)
    console_fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )
    console.setFormatter(console_fmt)
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(file_level or logging.DEBUG)
        file_fmt = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get an existing logger by name.

    Args:
        name: Logger name.

    Returns:
        Logger instance (may not be configured if setup_logging wasn't called).
    """
    return logging.getLogger(name)


class LoggerMixin:
    """
    Mixin class that provides logging capability.

    Usage:
        class Service(LoggerMixin):
            def __init__(self):
                self.setup_logger("service", log_file="logs/service.log")
    """

    _logger: Optional[logging.Logger] = None

    def setup_logger(
        self,
        name: str,
        log_file: Optional[Union[str, Path]] = None,
        level: Optional[int] = None,
    ) -> None:
        """Set up logger for this instance."""
        self._logger = setup_logging(name, log_file, level)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        if self._logger is None:
            # Create a default logger if not set up
            self._logger = logging.getLogger(self.__class__.__name__)
        return self._logger
