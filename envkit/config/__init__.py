"""Configuration module for envkit."""

from envkit.config.env import (
    EnvKeys,
    EnvReader,
    get_bool,
    get_env,
    get_list,
    get_memory_size,
    get_or_default,
    get_parsed,
    get_parsed_or_default,
    get_required,
    load_env,
)
from envkit.config.errors import EnvError, EnvParseError, MissingEnvError
from envkit.config.parsers import parse_memory_size
from envkit.config.sources import DictSource, EnvironSource, KeyValueSource

__all__ = [
    "EnvKeys",
    "EnvReader",
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
    "EnvError",
    "EnvParseError",
    "MissingEnvError",
    "KeyValueSource",
    "EnvironSource",
    "DictSource",
]
