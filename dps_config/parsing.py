"""
Environment Value Parsing for DPS Config

Lenient conversion of raw environment strings into configuration values.
Malformed input never raises: it is discarded and treated as unset.

Conventions:
- Boolean true is the exact string "Y"
- Empty text values are treated as unset
- Unsigned integers are plain ASCII digits (optional leading '+') within range
"""

import logging
import re
from typing import Any

log = logging.getLogger(__name__)

BOOL_TRUE = 'Y'

U16_MAX = 2 ** 16 - 1
U64_MAX = 2 ** 64 - 1

_UNSIGNED_PATTERN = re.compile(r'\+?[0-9]+')


def parse_text(value: Any, name: str = 'value') -> Any:
    """
    Map an empty string to None; anything else passes through.

    Strings that cannot be encoded as UTF-8 (undecodable environment bytes
    carried as lone surrogates) are also treated as unset.
    """
    if not isinstance(value, str):
        return value

    if value == '':
        return None

    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        log.debug(f"Ignoring non-UTF-8 value for {name}")
        return None

    return value


def parse_bool(value: Any) -> Any:
    """Map a raw string to True only when it equals "Y"."""
    if isinstance(value, str):
        return value == BOOL_TRUE
    return value


def parse_unsigned(value: Any, maximum: int, name: str = 'value') -> Any:
    """
    Parse an unsigned integer string, bounded by ``maximum``.

    Args:
        value: Raw value; non-string values are returned unchanged
        maximum: Largest accepted value (inclusive)
        name: Field or variable name, used only for the debug record

    Returns:
        The parsed int, or None when the string is not a valid
        unsigned integer in range
    """
    if not isinstance(value, str):
        return value

    if not _UNSIGNED_PATTERN.fullmatch(value):
        log.debug(f"Ignoring non-numeric value for {name}")
        return None

    # Length check first: int() refuses very long digit strings
    digits = value.lstrip('+').lstrip('0') or '0'
    if len(digits) > len(str(maximum)) or int(digits) > maximum:
        log.debug(f"Ignoring out-of-range value for {name} (max {maximum})")
        return None

    return int(digits)


def parse_u16(value: Any, name: str = 'value') -> Any:
    """Parse a 16-bit unsigned integer (ports, pool sizes)."""
    return parse_unsigned(value, U16_MAX, name)


def parse_u64(value: Any, name: str = 'value') -> Any:
    """Parse a 64-bit unsigned integer (durations in seconds)."""
    return parse_unsigned(value, U64_MAX, name)
