"""
Numeric utilities subpackage - no external dependencies.

Numeral parsing, value formatting, byte sizes, binary strings, ordinals.
"""

from ustr.numeric.convert import (
    parse_integer,
    parse_float,
    format_value,
    is_number,
)

from ustr.numeric.format import (
    human_readable_size,
    to_binary_string,
    ordinal,
    ordinal_suffix,
)

__all__ = [
    # convert
    "parse_integer",
    "parse_float",
    "format_value",
    "is_number",
    # format
    "human_readable_size",
    "to_binary_string",
    "ordinal",
    "ordinal_suffix",
]
