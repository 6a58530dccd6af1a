"""Key/value sources for environment lookups.

The accessor never touches os.environ directly. It asks a source,
so tests can swap in a fixed mapping instead of mutating process state.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional


class KeyValueSource(ABC):
    """
    Interface for anything that can answer "what is the value of NAME?".

    Implementations must read current state on every call - no caching.
    """

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """
        Look up a variable.

        Args:
            name: Variable name

        Returns:
            The raw string value, or None if not set.
        """
        pass


class EnvironSource(KeyValueSource):
    """Live process environment (os.environ)."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "EnvironSource()"


class DictSource(KeyValueSource):
    """
    In-memory source backed by a plain dict.

    Usage:
        source = DictSource({"PORT": "8080"})
        source.lookup("PORT")  # "8080"
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        """
        Initialize source.

        Args:
            initial: Starting variables (copied, not referenced).
        """
        self._vars: Dict[str, str] = dict(initial) if initial else {}

    def lookup(self, name: str) -> Optional[str]:
        return self._vars.get(name)

    def set(self, name: str, value: str) -> None:
        """Set or overwrite a variable."""
        self._vars[name] = value

    def unset(self, name: str) -> None:
        """Remove a variable if present."""
        self._vars.pop(name, None)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"DictSource({self._vars!r})"
