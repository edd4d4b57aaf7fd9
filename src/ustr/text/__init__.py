"""
Text utilities subpackage - no external dependencies.

Pure functions for paragraph wrapping, string manipulation and
substring checks.
"""

from ustr.text.paragraph import (
    wrap_to_width,
    unwrap_paragraph,
    split_paragraph,
    merge_paragraph,
)

from ustr.text.manipulate import (
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
)

from ustr.text.check import (
    starts_with,
    ends_with,
    is_abbreviation_of,
    equal,
    count_occurrences,
    any_word_matches,
)

__all__ = [
    # paragraph
    "wrap_to_width",
    "unwrap_paragraph",
    "split_paragraph",
    "merge_paragraph",
    # manipulate
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
    # check
    "starts_with",
    "ends_with",
    "is_abbreviation_of",
    "equal",
    "count_occurrences",
    "any_word_matches",
]
