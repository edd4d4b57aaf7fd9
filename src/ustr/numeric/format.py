"""
Human-oriented number formatting.

Byte sizes, fixed-width binary strings and English ordinals.
"""

__all__ = [
    "human_readable_size",
    "to_binary_string",
    "ordinal",
    "ordinal_suffix",
]

from ustr._checks import require_non_negative
from ustr.config import (
    BINARY_WIDTH,
    ORDINAL_SUFFIXES,
    SIZE_PRECISION,
    SIZE_STEP,
    SIZE_UNITS,
)


def human_readable_size(size: int) -> str:
    """
    Format a byte count with the largest fitting unit.

    Args:
        size: Number of bytes

    Returns:
        Size with two decimals and a unit among B, KB, MB, GB, TB

    Example:
        >>> human_readable_size(1024)
        '1.00 KB'
        >>> human_readable_size(1536 * 1024)
        '1.50 MB'
        >>> human_readable_size(0)
        '0.00 B'
    """
    require_non_negative("size", size)
    value = float(size)
    unit = 0
    while value >= SIZE_STEP and unit < len(SIZE_UNITS) - 1:
        value /= SIZE_STEP
        unit += 1
    return f"{value:.{SIZE_PRECISION}f} {SIZE_UNITS[unit]}"


def to_binary_string(value: int, length: int, word_width: int = BINARY_WIDTH) -> str:
    """
    Render the low bits of value, most significant first.

    Args:
        value: Integer to render (negative values use two's complement)
        length: Number of bits to emit, clamped to word_width
        word_width: Widest representable string

    Returns:
        A string of exactly min(length, word_width) '0'/'1' characters

    Example:
        >>> to_binary_string(5, 8)
        '00000101'
    """
    require_non_negative("length", length)
    length = min(length, word_width)
    if length == 0:
        return ""
    return format(value & ((1 << length) - 1), f"0{length}b")


def ordinal(value: int) -> str:
    """
    Return the English ordinal suffix of value.

    Example:
        >>> ordinal(2)
        'nd'
        >>> ordinal(112)
        'th'
    """
    remainder = abs(value) % 100
    if remainder // 10 == 1:
        return ORDINAL_SUFFIXES[0]
    remainder %= 10
    if remainder >= len(ORDINAL_SUFFIXES):
        return ORDINAL_SUFFIXES[0]
    return ORDINAL_SUFFIXES[remainder]


def ordinal_suffix(value: int) -> str:
    """
    Return value followed by its English ordinal suffix.

    Example:
        >>> ordinal_suffix(21)
        '21st'
        >>> ordinal_suffix(11)
        '11th'
    """
    return f"{value}{ordinal(value)}"
