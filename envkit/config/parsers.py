"""String conversions used by the environment accessor.

All functions here are pure: they take the raw string and return a value
or raise. None of them look anything up.
"""

from typing import List, Tuple

from envkit.config.errors import EnvParseError

# Compared against the lower-cased value
TRUTHY_VALUES = frozenset({"true", "1", "yes", "on"})

# Checked in order against the upper-cased input
MEMORY_SUFFIXES: Tuple[Tuple[str, int], ...] = (
    ("KB", 1024),
    ("MB", 1024 * 1024),
    ("GB", 1024 * 1024 * 1024),
)

MEMORY_SIZE_KEY = "memory_size"


def parse_bool(value: str) -> bool:
    """Return True iff value is a truthy token. Anything else is False."""
    return value.lower() in TRUTHY_VALUES


def split_list(value: str, delimiter: str = ",") -> List[str]:
    """
    Split a delimited string and trim each piece.

    Empty segments are kept, so "a,b," gives ["a", "b", ""].
    """
    return [part.strip() for part in value.split(delimiter)]


def parse_memory_size(input: str) -> int:
    """
    Parse a human-readable memory size into bytes.

    Accepts "<digits>" or "<digits>KB|MB|GB", case-insensitive, with outer
    whitespace ignored. Sizes are powers of 1024.

    Args:
        input: Size string, e.g. "512KB", "10mb", "1GB", "123"

    Returns:
        Size in bytes.

    Raises:
        EnvParseError: With key "memory_size" and the normalized string.
    """
    normalized = input.strip().upper()

    num_part, multiplier = normalized, 1
    for suffix, factor in MEMORY_SUFFIXES:
        if normalized.endswith(suffix):
            num_part, multiplier = normalized[: -len(suffix)], factor
            break

    # int() alone would accept "+1", "1_000" and non-ASCII digits
    if not (num_part.isascii() and num_part.isdigit()):
        raise EnvParseError(MEMORY_SIZE_KEY, normalized)

    return int(num_part) * multiplier
