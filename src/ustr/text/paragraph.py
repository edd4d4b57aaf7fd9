"""
Paragraph word-wrap and merge.

`wrap_to_width` turns a single line into a fixed-width paragraph by
replacing whitespace runs with line breaks; `unwrap_paragraph` folds
such a paragraph back into one line.
"""

__all__ = [
    "wrap_to_width",
    "unwrap_paragraph",
    "split_paragraph",
    "merge_paragraph",
]

from loguru import logger

from ustr._checks import require_non_negative
from ustr.config import DEFAULT_WHITESPACE, LINE_BREAK


def _rfind_in(text: str, chars: str, start: int, end: int) -> int:
    """Index of the last character of text[start:end + 1] found in chars, or -1."""
    for index in range(min(end, len(text) - 1), start - 1, -1):
        if text[index] in chars:
            return index
    return -1


def _rfind_not_in(text: str, chars: str, start: int, end: int) -> int:
    """Index of the last character of text[start:end + 1] not in chars, or -1."""
    for index in range(min(end, len(text) - 1), start - 1, -1):
        if text[index] not in chars:
            return index
    return -1


def _find_not_in(text: str, chars: str, start: int) -> int:
    """Index of the first character from start on not in chars, or len(text)."""
    for index in range(start, len(text)):
        if text[index] not in chars:
            return index
    return len(text)


def wrap_to_width(
    text: str,
    width: int,
    whitespace: str = DEFAULT_WHITESPACE,
) -> str:
    """
    Break a single-line text into lines of at most width characters.

    Breaks only happen at whitespace: each chosen whitespace run is
    replaced by a single line break. A word longer than width stops the
    wrapping, and the rest of the text is returned as it is.

    Args:
        text: Text to wrap
        width: Maximum line length (0 leaves the text untouched)
        whitespace: Characters at which a line may be broken

    Returns:
        The wrapped text

    Raises:
        ValueError: If width is negative

    Example:
        >>> wrap_to_width("AAAA BBBB CCCC DDDD", 4)
        'AAAA\\nBBBB\\nCCCC\\nDDDD'
        >>> wrap_to_width("one two three", 8)
        'one two\\nthree'
    """
    require_non_negative("width", width)
    if width == 0:
        return text

    line_start = 0
    boundary = width - 1
    while boundary < len(text):
        # The character just past the boundary may itself be the break.
        ws_index = _rfind_in(text, whitespace, line_start, boundary + 1)
        if ws_index < 0:
            logger.debug(
                f"No whitespace in [{line_start}, {boundary + 1}], stopping wrap"
            )
            break
        last_word_end = _rfind_not_in(text, whitespace, line_start, ws_index)
        if last_word_end < 0:
            break
        run_end = _find_not_in(text, whitespace, last_word_end + 1)
        text = text[: last_word_end + 1] + LINE_BREAK + text[run_end:]

        line_start = last_word_end + 2
        existing_break = text.find(LINE_BREAK, line_start, line_start + width)
        if existing_break >= 0:
            line_start = existing_break + 1
        boundary = line_start + width - 1
    return text


def unwrap_paragraph(text: str) -> str:
    """
    Merge a paragraph back into a single line.

    Every run of spaces and every run of line breaks becomes one space.
    The first character is kept as it is, and text already produced is
    never scanned again.

    Args:
        text: Paragraph text

    Returns:
        The single-line text

    Example:
        >>> unwrap_paragraph("AAAA\\nBBBB\\nCCCC\\nDDDD")
        'AAAA BBBB CCCC DDDD'
        >>> unwrap_paragraph("one   two\\n\\n\\nthree")
        'one two three'
    """
    if len(text) < 2:
        return text

    merged = [text[0]]
    index = 1
    while index < len(text):
        char = text[index]
        if char == " " or char == LINE_BREAK:
            while index < len(text) and text[index] == char:
                index += 1
            merged.append(" ")
            continue
        merged.append(char)
        index += 1
    return "".join(merged)


split_paragraph = wrap_to_width
merge_paragraph = unwrap_paragraph
