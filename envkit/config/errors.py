"""Errors raised by environment lookups."""


class EnvError(Exception):
    """Base class for environment lookup failures."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class MissingEnvError(EnvError):
    """The named variable is not set."""

    def __init__(self, key: str):
        super().__init__(key, f"Environment variable `{key}` is not set")


class EnvParseError(EnvError):
    """The variable is set but its value could not be converted."""

    def __init__(self, key: str, value: str):
        super().__init__(key, f"Failed to parse environment variable `{key}`: {value}")
        self.value = value
