"""Logging module for envkit."""

from envkit.log.logger import LoggerMixin, get_logger, level_from_env, setup_logging

__all__ = ["setup_logging", "get_logger", "level_from_env", "LoggerMixin"]
