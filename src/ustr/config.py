"""
Library configuration and defaults.

All default characters, unit tables and limits are centralized here
so the function signatures stay readable.
"""

from typing import Any, Dict, Tuple

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Trimming and alignment
    "pad_chars": " ",  # Characters removed by trim/left_trim/right_trim
    "fill_char": " ",  # Filler used by the align functions
    # Word wrap
    "wrap_whitespace": " \t\r",  # Breakable characters ("\n" is not one of them)
    "line_break": "\n",
    # Splitting
    "split_delimiters": " ",
    # Numeric formatting
    "size_units": ("B", "KB", "MB", "GB", "TB"),
    "size_step": 1024,
    "size_precision": 2,
    "binary_width": 32,  # Widest binary string to_binary_string will produce
    "ordinal_suffixes": ("th", "st", "nd", "rd"),
    # Logging
    "log_format": "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
}

# ====================================================================
# NAMED CONSTANTS
# ====================================================================

DEFAULT_PAD_CHARS: str = CONFIG["pad_chars"]
DEFAULT_FILL: str = CONFIG["fill_char"]
DEFAULT_WHITESPACE: str = CONFIG["wrap_whitespace"]
LINE_BREAK: str = CONFIG["line_break"]
DEFAULT_DELIMITERS: str = CONFIG["split_delimiters"]

SIZE_UNITS: Tuple[str, ...] = CONFIG["size_units"]
SIZE_STEP: int = CONFIG["size_step"]
SIZE_PRECISION: int = CONFIG["size_precision"]
BINARY_WIDTH: int = CONFIG["binary_width"]
ORDINAL_SUFFIXES: Tuple[str, ...] = CONFIG["ordinal_suffixes"]

LOG_FORMAT: str = CONFIG["log_format"]
