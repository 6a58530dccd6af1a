"""Environment variable loading and access.

Secrets should be stored in .env files only. Values are read from the
live environment on every call; nothing is cached.

Usage:
    load_env()
    host = get_or_default("HOST", "127.0.0.1")
    port = get_parsed("PORT", int)
    debug = get_bool("DEBUG", False)
    buffer = get_memory_size("BUFFER_SIZE")  # "10MB" -> 10485760
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar, Union

from dotenv import load_dotenv

from envkit.config.errors import EnvParseError, MissingEnvError
from envkit.config.parsers import parse_bool, parse_memory_size, split_list
from envkit.config.sources import EnvironSource, KeyValueSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors a conversion callable may raise on bad input.
# decimal.InvalidOperation is an ArithmeticError.
_CONVERSION_ERRORS = (ValueError, TypeError, ArithmeticError)


def _parse_strict_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"invalid bool: {value!r}")


def _parser_for(default: Any) -> Callable[[str], Any]:
    # bool("false") is True, so bool defaults get an exact parser
    if isinstance(default, bool):
        return _parse_strict_bool
    return type(default)


def load_env(env_path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """
    Load environment variables from .env file.

    Args:
        env_path: Path to .env file. If None, searches current directory
                  and parent directories.
        override: Overwrite variables that are already set.

    Returns:
        True if .env file was found and loaded, False otherwise.
    """
    if env_path:
        loaded = load_dotenv(env_path, override=override)
    else:
        loaded = load_dotenv(override=override)

    if loaded:
        logger.debug(f"Loaded environment from {env_path or '.env'}")
    else:
        logger.debug(f"No environment file loaded ({env_path or 'search'})")
    return loaded


class EnvReader:
    """
    Typed access to a key/value source.

    Usage:
        reader = EnvReader(DictSource({"WORKERS": "4", "TAGS": "a, b"}))
        reader.get_parsed("WORKERS", int)  # 4
        reader.get_list("TAGS")            # ["a", "b"]
    """

    def __init__(self, source: Optional[KeyValueSource] = None):
        """
        Initialize reader.

        Args:
            source: Where values come from. Defaults to the live OS environment.
        """
        self._source = source if source is not None else EnvironSource()

    @property
    def source(self) -> KeyValueSource:
        """Get the underlying source."""
        return self._source

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get an environment variable value.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            The environment variable value or default.
        """
        value = self._source.lookup(key)
        return default if value is None else value

    def get_required(self, key: str) -> str:
        """
        Get a required environment variable.

        Args:
            key: Environment variable name

        Returns:
            The raw value, untrimmed.

        Raises:
            MissingEnvError: If the environment variable is not set.
        """
        value = self._source.lookup(key)
        if value is None:
            raise MissingEnvError(key)
        return value

    def get_or_default(self, key: str, default: str) -> str:
        """Get the raw value, or default if not set. Never raises."""
        value = self._source.lookup(key)
        return default if value is None else value

    def get_parsed(self, key: str, parse: Callable[[str], T] = int) -> T:
        """
        Get a required variable and convert it.

        Args:
            key: Environment variable name
            parse: Conversion from string, e.g. int, float, Decimal

        Returns:
            The converted value.

        Raises:
            MissingEnvError: If the variable is not set.
            EnvParseError: If the conversion fails.
        """
        value = self.get_required(key)
        try:
            return parse(value)
        except _CONVERSION_ERRORS:
            raise EnvParseError(key, value) from None

    def get_parsed_or_default(
        self,
        key: str,
        default: T,
        parse: Optional[Callable[[str], T]] = None,
    ) -> T:
        """
        Get and convert a variable, falling back to default.

        Missing and unparsable values both return default; no error is
        raised. Use get_parsed() to see failures.

        Args:
            key: Environment variable name
            default: Returned when the variable is unset or invalid
            parse: Conversion from string. Defaults to type(default).

        Returns:
            The converted value or default.
        """
        value = self._source.lookup(key)
        if value is None:
            return default

        if parse is None:
            parse = _parser_for(default)
        try:
            return parse(value)
        except _CONVERSION_ERRORS:
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        """
        Get a boolean flag.

        "true", "1", "yes", "on" (any case) are True. Any other value that
        is set is False; default only applies when the variable is unset.
        """
        value = self._source.lookup(key)
        if value is None:
            return default
        return parse_bool(value)

    def get_list(self, key: str) -> List[str]:
        """
        Get a comma-separated list.

        Each item is trimmed. Empty items are kept and order is preserved.

        Raises:
            MissingEnvError: If the variable is not set.
        """
        return split_list(self.get_required(key))

    def get_memory_size(self, key: str) -> int:
        """
        Get a memory size ("512KB", "10MB", "1GB") in bytes.

        Raises:
            MissingEnvError: If the variable is not set.
            EnvParseError: If the value is not a valid size. The error
                carries this variable's name and the normalized value.
        """
        value = self.get_required(key)
        try:
            return parse_memory_size(value)
        except EnvParseError as e:
            raise EnvParseError(key, e.value) from None

    def __repr__(self) -> str:
        return f"EnvReader({self._source!r})"


# Reads os.environ on every lookup
_default_reader = EnvReader()


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable value, or default if not set."""
    return _default_reader.get_env(key, default)


def get_required(key: str) -> str:
    """Get a required environment variable. Raises MissingEnvError if unset."""
    return _default_reader.get_required(key)


def get_or_default(key: str, default: str) -> str:
    """Get an environment variable, or default verbatim if unset."""
    return _default_reader.get_or_default(key, default)


def get_parsed(key: str, parse: Callable[[str], T] = int) -> T:
    """Get and convert a required variable. See EnvReader.get_parsed()."""
    return _default_reader.get_parsed(key, parse)


def get_parsed_or_default(
    key: str,
    default: T,
    parse: Optional[Callable[[str], T]] = None,
) -> T:
    """Get and convert a variable, or default if unset or invalid."""
    return _default_reader.get_parsed_or_default(key, default, parse)


def get_bool(key: str, default: bool) -> bool:
    """Get a boolean flag. See EnvReader.get_bool()."""
    return _default_reader.get_bool(key, default)


def get_list(key: str) -> List[str]:
    """Get a trimmed comma-separated list. Raises MissingEnvError if unset."""
    return _default_reader.get_list(key)


def get_memory_size(key: str) -> int:
    """Get a memory size in bytes. See EnvReader.get_memory_size()."""
    return _default_reader.get_memory_size(key)


# Common environment variable keys
class EnvKeys:
    """Environment variable names read by envkit itself."""

    LOG_LEVEL = "LOG_LEVEL"
