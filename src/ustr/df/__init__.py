"""
DataFrame utilities subpackage - requires polars.

Apply the text functions to DataFrame string columns.
"""

from ustr.df.columns import (
    map_text_column,
    wrap_column,
    unwrap_column,
    trim_column,
    count_column,
)

__all__ = [
    "map_text_column",
    "wrap_column",
    "unwrap_column",
    "trim_column",
    "count_column",
]
