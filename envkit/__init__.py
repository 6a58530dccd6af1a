"""
envkit - Environment variable configuration helpers

Typed lookups over the process environment: required/optional values,
parsed numbers, boolean flags, comma-separated lists and memory sizes.

Philosophy: Read, convert, report. No config files, no merging, no reload.
"""

from envkit.version import __version__

# Configuration
from envkit.config import (
    DictSource,
    EnvError,
    EnvironSource,
    EnvKeys,
    EnvParseError,
    EnvReader,
    KeyValueSource,
    MissingEnvError,
    get_bool,
    get_env,
    get_list,
    get_memory_size,
    get_or_default,
    get_parsed,
    get_parsed_or_default,
    get_required,
    load_env,
    parse_memory_size,
)

# Logging
from envkit.log import LoggerMixin, get_logger, level_from_env, setup_logging

__all__ = [
    "__version__",
    # Accessor
    "load_env",
    "get_env",
    "get_required",
    "get_or_default",
    "get_parsed",
    "get_parsed_or_default",
    "get_bool",
    "get_list",
    "get_memory_size",
    "parse_memory_size",
    "EnvReader",
    "EnvKeys",
    # Sources
    "KeyValueSource",
    "EnvironSource",
    "DictSource",
    # Errors
    "EnvError",
    "EnvParseError",
    "MissingEnvError",
    # Logging
    "setup_logging",
    "get_logger",
    "level_from_env",
    "LoggerMixin",
]
