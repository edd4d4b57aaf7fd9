"""
ustr - Small, stateless string utilities.

This package is organized into focused subpackages:

- text/     Pure text utilities (no dependencies)
            - paragraph: wrap_to_width, unwrap_paragraph
            - manipulate: trim, align, replace, strip, split, capitalize
            - check: starts_with, ends_with, equal, count_occurrences

- numeric/  Numeral conversions (no dependencies)
            - convert: parse_integer, parse_float, format_value, is_number
            - format: human_readable_size, to_binary_string, ordinal_suffix

- df/       DataFrame utilities (requires polars)
            - columns: map_text_column, wrap_column, trim_column

- cli       Command line front end (requires fire)

Usage:
    from ustr import wrap_to_width, unwrap_paragraph
    from ustr.text import capitalize, starts_with
    from ustr.numeric import human_readable_size
    from ustr.df import wrap_column

Logging goes through loguru and is disabled for the "ustr" namespace
until `enable_logging` is called.
"""

__version__ = "0.0.1"

import sys
from typing import Optional

from loguru import logger

from ustr.config import LOG_FORMAT

# Convenience imports from text (no dependencies)
from ustr.text import (
    wrap_to_width,
    unwrap_paragraph,
    split_paragraph,
    merge_paragraph,
    trim,
    left_trim,
    right_trim,
    to_upper,
    to_lower,
    left_align,
    right_align,
    center_align,
    replace,
    replace_count,
    replace_inplace,
    strip,
    strip_inplace,
    split,
    capitalize,
    decapitalize,
    starts_with,
    ends_with,
    is_abbreviation_of,
    equal,
    count_occurrences,
    any_word_matches,
)

# Convenience imports from numeric (no dependencies)
from ustr.numeric import (
    parse_integer,
    parse_float,
    format_value,
    is_number,
    human_readable_size,
    to_binary_string,
    ordinal,
    ordinal_suffix,
)

logger.disable("ustr")

_handler_id: Optional[int] = None


def enable_logging(level: str = "DEBUG") -> int:
    """
    Send ustr log records to stderr at the given level.

    Only the sink added by a previous call is replaced; sinks configured
    by the host application are left alone.

    Returns:
        The loguru handler id of the ustr sink
    """
    global _handler_id
    logger.enable("ustr")
    if _handler_id is not None:
        logger.remove(_handler_id)
    _handler_id = logger.add(sys.stderr, level=level, format=LOG_FORMAT, filter="ustr")
    return _handler_id


__all__ = [
    "__version__",
    "enable_logging",
    # text.paragraph
    "wrap_to_width",
    "unwrap_paragraph",
    "split_paragraph",
    "merge_paragraph",
    # text.manipulate
    "trim",
    "left_trim",
    "right_trim",
    "to_upper",
    "to_lower",
    "left_align",
    "right_align",
    "center_align",
    "replace",
    "replace_count",
    "replace_inplace",
    "strip",
    "strip_inplace",
    "split",
    "capitalize",
    "decapitalize",
    # text.check
    "starts_with",
    "ends_with",
    "is_abbreviation_of",
    "equal",
    "count_occurrences",
    "any_word_matches",
    # numeric.convert
    "parse_integer",
    "parse_float",
    "format_value",
    "is_number",
    # numeric.format
    "human_readable_size",
    "to_binary_string",
    "ordinal",
    "ordinal_suffix",
]
