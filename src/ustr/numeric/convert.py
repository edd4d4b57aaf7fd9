"""
Numeral parsing and value formatting.

The parsers scan a leading numeral the way C's strtol/strtod do and
fall back to zero instead of raising on text with no numeral.
"""

__all__ = [
    "parse_integer",
    "parse_float",
    "format_value",
    "is_number",
]

import re
from typing import Any, Callable, TypeVar

from loguru import logger

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_NUMBER_PATTERN = re.compile(r"[+-]?\d+")


def parse_integer(text: str, kind: Callable[[int], T] = int) -> T:
    """
    Parse the leading base-10 integer of text.

    Leading whitespace and a sign are accepted; parsing stops at the
    first character that is not a digit.

    Args:
        text: Text starting with a numeral
        kind: Callable converting the parsed int to the wanted type

    Returns:
        kind(parsed value), or kind(0) when text has no leading numeral

    Example:
        >>> parse_integer("  42px")
        42
        >>> parse_integer("abc")
        0
    """
    match = _INTEGER_PATTERN.match(text)
    if match is None:
        logger.debug(f"No integer numeral in {text!r}, using 0")
        return kind(0)
    return kind(int(match.group(1)))


def parse_float(text: str, kind: Callable[[float], T] = float) -> T:
    """
    Parse the leading decimal floating point numeral of text.

    Example:
        >>> parse_float("3.14 rad")
        3.14
        >>> parse_float("-1e3x")
        -1000.0
        >>> parse_float("pi")
        0.0
    """
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        logger.debug(f"No float numeral in {text!r}, using 0")
        return kind(0.0)
    return kind(float(match.group(1)))


def format_value(value: Any, spec: str = "") -> str:
    """Format a value with Python's default formatting (or the given format spec)."""
    return format(value, spec)


def is_number(text: str) -> bool:
    """
    Check whether text is an optionally signed run of digits.

    Example:
        >>> is_number("-123")
        True
        >>> is_number("12a")
        False
        >>> is_number("")
        False
    """
    return _NUMBER_PATTERN.fullmatch(text) is not None and text.isascii()
