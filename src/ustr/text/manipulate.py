"""
String manipulation utilities.

Trimming, ASCII case mapping, alignment, literal replacement,
character stripping, delimiter splitting and word capitalization.
"""

__all__ = [
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
]

from typing import Callable, List, Tuple, Union

from ustr._checks import require_non_negative, require_single_char
from ustr.config import DEFAULT_DELIMITERS, DEFAULT_FILL, DEFAULT_PAD_CHARS

BytesLike = Union[str, bytes, bytearray]

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def trim(text: str, pad_chars: str = DEFAULT_PAD_CHARS) -> str:
    """
    Remove pad characters from both ends of the text.

    Args:
        text: Text to trim
        pad_chars: Set of characters to remove

    Returns:
        Trimmed text, empty if text is made only of pad characters

    Example:
        >>> trim("_ _-_abc_-_ _", " _-")
        'abc'
    """
    return text.strip(pad_chars)


def left_trim(text: str, pad_chars: str = DEFAULT_PAD_CHARS) -> str:
    """
    Remove pad characters from the beginning of the text.

    Example:
        >>> left_trim("_-_ _abc ", " _-")
        'abc '
    """
    return text.lstrip(pad_chars)


def right_trim(text: str, pad_chars: str = DEFAULT_PAD_CHARS) -> str:
    """
    Remove pad characters from the end of the text.

    Example:
        >>> right_trim(" abc_-_ _", " _-")
        ' abc'
    """
    return text.rstrip(pad_chars)


def to_upper(text: str) -> str:
    """Map ASCII letters to upper case, leaving other characters alone."""
    return text.translate(_ASCII_UPPER)


def to_lower(text: str) -> str:
    """Map ASCII letters to lower case, leaving other characters alone."""
    return text.translate(_ASCII_LOWER)


def _padding(text: str, width: int, fill: str) -> int:
    require_non_negative("width", width)
    require_single_char("fill", fill)
    return max(width - len(text), 0)


def left_align(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Pad text on the right up to width characters.

    Args:
        text: Text to align
        width: Total length of the result
        fill: Single padding character

    Returns:
        Aligned text, or text itself when it is already width long or more

    Example:
        >>> left_align("hello", 10)
        'hello     '
    """
    return text + fill * _padding(text, width, fill)


def right_align(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Pad text on the left up to width characters.

    Example:
        >>> right_align("hello", 10)
        '     hello'
    """
    return fill * _padding(text, width, fill) + text


def center_align(text: str, width: int, fill: str = DEFAULT_FILL) -> str:
    """
    Pad text on both sides up to width characters.

    The odd padding character, if any, goes on the right.

    Example:
        >>> center_align("hello", 10)
        '  hello   '
    """
    pad = _padding(text, width, fill)
    left = pad // 2
    return fill * left + text + fill * (pad - left)


def replace_count(
    text: str,
    pattern: str,
    substitute: str,
    limit: int = 0,
) -> Tuple[str, int]:
    """
    Replace literal occurrences of pattern and count the replacements.

    Matches are found left to right without overlap. Scanning resumes
    right after each inserted substitute, so a substitute containing
    the pattern is never matched again.

    Args:
        text: Source text
        pattern: Literal substring to look for (empty pattern is a no-op)
        substitute: Replacement text
        limit: Maximum number of replacements (0 replaces all)

    Returns:
        Tuple of (new text, number of replacements)

    Example:
        >>> replace_count("a-b-c", "-", "+", 1)
        ('a+b-c', 1)
    """
    require_non_negative("limit", limit)
    if not pattern:
        return text, 0

    pieces = []
    count = 0
    position = 0
    while limit == 0 or count < limit:
        found = text.find(pattern, position)
        if found < 0:
            break
        pieces.append(text[position:found])
        pieces.append(substitute)
        position = found + len(pattern)
        count += 1
    pieces.append(text[position:])
    return "".join(pieces), count


def replace(text: str, pattern: str, substitute: str, limit: int = 0) -> str:
    """
    Replace up to limit literal occurrences of pattern (0 replaces all).

    Example:
        >>> replace("Hello there!", "there", "friend")
        'Hello friend!'
        >>> replace("ratio ratio ratio", "ratio", "RATIO", 1)
        'RATIO ratio ratio'
    """
    return replace_count(text, pattern, substitute, limit)[0]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def replace_inplace(
    buffer: bytearray,
    pattern: BytesLike,
    substitute: BytesLike,
    limit: int = 0,
) -> bytearray:
    """
    Replace literal occurrences of pattern inside a caller-owned buffer.

    Same matching rules as `replace`. The buffer is modified and
    returned, so calls can be chained. Text arguments are encoded as
    latin-1.

    Args:
        buffer: Mutable buffer to edit
        pattern: Literal pattern to look for (empty pattern is a no-op)
        substitute: Replacement
        limit: Maximum number of replacements (0 replaces all)

    Returns:
        The same buffer object

    Example:
        >>> replace_inplace(bytearray(b"Hello world!"), "world", "friend")
        bytearray(b'Hello friend!')
    """
    require_non_negative("limit", limit)
    pattern = _as_bytes(pattern)
    substitute = _as_bytes(substitute)
    if not pattern:
        return buffer

    count = 0
    position = buffer.find(pattern)
    while position >= 0:
        buffer[position : position + len(pattern)] = substitute
        count += 1
        if limit and count >= limit:
            break
        position = buffer.find(pattern, position + len(substitute))
    return buffer


def strip(text: str, ch: str) -> str:
    """
    Remove every occurrence of a single character.

    Example:
        >>> strip("a-b-c-", "-")
        'abc'
    """
    require_single_char("ch", ch)
    return text.replace(ch, "")


def strip_inplace(buffer: bytearray, ch: BytesLike) -> bytearray:
    """Remove every occurrence of a single character from buffer, in place."""
    code = _as_bytes(ch)
    if len(code) != 1:
        raise ValueError(f"ch must be a single character, got {ch!r}")
    buffer[:] = buffer.replace(code, b"")
    return buffer


def split(text: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """
    Split text on runs of delimiter characters.

    Any character of delimiters separates tokens. Empty tokens are never
    produced, including at the ends of the text.

    Args:
        text: Text to split
        delimiters: Set of separator characters (empty means no splitting)

    Returns:
        List of non-empty tokens

    Example:
        >>> split("a,,b; c", ",; ")
        ['a', 'b', 'c']
    """
    tokens = []
    current = []
    for char in text:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def _change_word_starts(
    text: str,
    limit: int,
    convert: Callable[[str], str],
) -> str:
    require_non_negative("limit", limit)
    chars = list(text)
    remaining = limit
    for index, char in enumerate(chars):
        if index == 0:
            is_start = char.isascii() and char.isalpha()
        else:
            is_start = chars[index - 1] == " "
        if not is_start:
            continue
        chars[index] = convert(char)
        # Every word start counts, converted or not.
        if limit:
            remaining -= 1
            if remaining == 0:
                break
    return "".join(chars)


def capitalize(text: str, limit: int = 1) -> str:
    """
    Upper-case the first letter of up to limit words.

    A word starts at index 0 when that character is a letter, or right
    after a space. Tabs and newlines do not start words. Each word start
    uses up one unit of limit even when it is not a letter.

    Args:
        text: Text to capitalize
        limit: Number of word starts to process (0 processes all)

    Returns:
        The capitalized text

    Example:
        >>> capitalize("hello there friend!", 2)
        'Hello There friend!'
        >>> capitalize("hello there friend!", 0)
        'Hello There Friend!'
    """
    return _change_word_starts(text, limit, to_upper)


def decapitalize(text: str, limit: int = 1) -> str:
    """
    Lower-case the first letter of up to limit words.

    Example:
        >>> decapitalize("Hello There Friend!", 2)
        'hello there Friend!'
    """
    return _change_word_starts(text, limit, to_lower)
