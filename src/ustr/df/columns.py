"""
DataFrame column text transformations - requires polars.

Apply the text functions element-wise to string columns.
"""

__all__ = [
    "map_text_column",
    "wrap_column",
    "unwrap_column",
    "trim_column",
    "count_column",
]

from typing import Any, Callable, Optional

import polars as pl

from ustr.config import DEFAULT_PAD_CHARS, DEFAULT_WHITESPACE
from ustr.text.check import count_occurrences
from ustr.text.manipulate import trim
from ustr.text.paragraph import unwrap_paragraph, wrap_to_width


def map_text_column(
    df: pl.DataFrame,
    column: str,
    func: Callable[..., Any],
    output_column: Optional[str] = None,
    return_dtype: pl.DataType = pl.String,
    **kwargs: Any,
) -> pl.DataFrame:
    """
    Apply a text function to every value of a string column.

    Null values stay null.

    Args:
        df: Input DataFrame
        column: String column to transform
        func: Function taking the cell text as first argument
        output_column: Name for the result column (defaults to column itself)
        return_dtype: Polars dtype of the result
        **kwargs: Extra keyword arguments passed to func

    Returns:
        DataFrame with the transformed column, or df unchanged if the
        column does not exist

    Example:
        >>> df = pl.DataFrame({"name": ["  ada ", "bob"]})
        >>> map_text_column(df, "name", trim)
        shape: (2, 1)
        ┌──────┐
        │ name │
        ├──────┤
        │ ada  │
        │ bob  │
        └──────┘
    """
    if column not in df.columns:
        return df

    return df.with_columns(
        pl.col(column)
        .map_elements(lambda value: func(value, **kwargs), return_dtype=return_dtype)
        .alias(output_column or column)
    )


def wrap_column(
    df: pl.DataFrame,
    column: str,
    width: int,
    whitespace: str = DEFAULT_WHITESPACE,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """Word-wrap every value of a string column to width."""
    return map_text_column(
        df, column, wrap_to_width, output_column, width=width, whitespace=whitespace
    )


def unwrap_column(
    df: pl.DataFrame,
    column: str,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """Merge every paragraph of a string column into a single line."""
    return map_text_column(df, column, unwrap_paragraph, output_column)


def trim_column(
    df: pl.DataFrame,
    column: str,
    pad_chars: str = DEFAULT_PAD_CHARS,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """Trim pad characters from both ends of every value of a string column."""
    return map_text_column(df, column, trim, output_column, pad_chars=pad_chars)


def count_column(
    df: pl.DataFrame,
    column: str,
    pattern: str,
    case_sensitive: bool = True,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """
    Count occurrences of pattern in every value of a string column.

    The counts go to output_column (defaults to column + "_count").

    Example:
        >>> df = pl.DataFrame({"text": ["a b a", "b"]})
        >>> count_column(df, "text", "a")["text_count"].to_list()
        [2, 0]
    """
    return map_text_column(
        df,
        column,
        count_occurrences,
        output_column or f"{column}_count",
        return_dtype=pl.Int64,
        pattern=pattern,
        case_sensitive=case_sensitive,
    )
